import logging
from typing import List
from app.core.crud import ModelService
from app.core.utils import parse_id
from app.core.validation import collect_values, optional, raise_for_errors
from app.match_goals.models.match_goal_model import MatchGoal
from app.match_goals.validations import match_goal_validations as rules

logger = logging.getLogger(__name__)


class MatchGoalService(ModelService):
    """Goals of one match; every lookup is scoped to the match in the path."""

    model = MatchGoal
    label = "match goal"

    def get_goals(self, match_id) -> List[MatchGoal]:
        raise_for_errors(rules.validate_match(self.db, match_id))
        return (
            self.query()
            .filter(MatchGoal.match_id == parse_id(match_id))
            .order_by(MatchGoal.id)
            .all()
        )

    def get_goal(self, match_id, goal_id) -> MatchGoal:
        raise_for_errors(rules.validate_goal(self.db, match_id, goal_id))
        return self.find(match_id, goal_id)

    def find(self, match_id, goal_id) -> MatchGoal:
        return (
            self.query()
            .filter(MatchGoal.id == parse_id(goal_id), MatchGoal.match_id == parse_id(match_id))
            .first()
        )

    def create_goal(self, match_id, data: dict) -> MatchGoal:
        raise_for_errors(rules.validate_create(self.db, match_id, data))
        values = collect_values(rules.match_goal_fields(), data)

        goal = MatchGoal(match_id=parse_id(match_id), **values)
        self.db.add(goal)
        self.commit(goal)
        logger.info(f"✅ Created match goal {goal.id} for match {goal.match_id}")
        return goal

    def update_goal(self, match_id, goal_id, data: dict) -> MatchGoal:
        raise_for_errors(rules.validate_update(self.db, match_id, goal_id, data))
        goal = self.find(match_id, goal_id)
        return self.apply(goal, collect_values(optional(rules.match_goal_fields()), data))

    def delete_goal(self, match_id, goal_id) -> MatchGoal:
        goal = self.get_goal(match_id, goal_id)
        return self.remove(goal)
