"""
Sample data for local development and the test suite.

Run with ``python -m app.core.seed``. Seeding is skipped when the database
already holds users.
"""
import logging
from datetime import datetime
from sqlalchemy.orm import Session
from app.core.database import SessionLocal, init_db
from app.core.security import encrypt_password
from app.core.utils import utc_now
from app.competitions.models.competition_model import Competition, CompetitionType
from app.country.models.country_model import Country
from app.match_goals.models.match_goal_model import MatchGoal
from app.matches.models.match_model import Match
from app.players.models.player_model import Player
from app.positions.models.position_model import Position
from app.seasons.models.seasons_model import Season
from app.teams.models.team_model import Team
from app.transfers.models.transfer_model import Transfer
from app.trophies.models.trophy_model import Trophy
from app.users.models.user_model import Role, User

logger = logging.getLogger(__name__)

USERS = [
    ("Syntyche Joann", "syntyche@gmail.com", "syntychejoann", Role.ADMIN),
    ("Taqqiq Berlin", "taqqiq@gmail.com", "taqqiqberlin", Role.USER),
    ("Rosalinda Astrid", "rosalinda@gmail.com", "rosalindaastrid", Role.USER),
    ("John Astrid", "john@gmail.com", "johnastrid", Role.USER),
    ("Richard Astrid", "richard@gmail.com", "richardastrid", Role.ADMIN),
    ("Roberto Alfredo", "roberto@gmail.com", "robertoalfredo", Role.USER),
    ("James Williams", "james@gmail.com", "jameswilliams", Role.USER),
]

COUNTRIES = [
    ("Brazil", "BR"),
    ("Spain", "ES"),
    ("United States of America", "US"),
    ("Uruguay", "UY"),
]

POSITIONS = ["Goalkeeper", "Left Winger", "Right Winger", "Centre Forward"]

COMPETITIONS = [
    ("BF Cup", "BF", CompetitionType.CUP),
    ("English League", "EL", CompetitionType.LEAGUE),
    ("Spanish Cup", "ES", CompetitionType.CUP),
    ("Patski League", "PA", CompetitionType.LEAGUE),
]

SEASONS = [(1920, False), (1941, False), (1980, False), (2000, True)]

TEAMS = [("Team A", "TEA"), ("Team B", "TEB"), ("Team C", "TEC"), ("Team D", "TED")]

# (competition, season, team) by position in the lists above
TROPHIES = [(1, 0, 1), (0, 2, 0), (2, 0, 1), (0, 0, 1)]

# (competition, home team, away team, season)
MATCHES = [(0, 0, 1, 0), (0, 1, 0, 1), (2, 0, 1, 0), (1, 2, 1, 1)]

PLAYERS = ["Player A", "Player B", "Player C", "Player D"]

# (player, previous team, new team, fee)
TRANSFERS = [(0, 0, 1, 100000), (0, 1, 0, 60000), (1, 1, 0, 100000), (1, 1, 0, 100000)]

# (goalscorer, own goal); every goal is scored by the first team in the first match
GOALS = [(0, True), (1, False), (1, False), (1, True)]


def add_all(db: Session, records: list) -> list:
    db.add_all(records)
    db.flush()
    return records


def seed_database(db: Session) -> bool:
    """Insert the sample rows. Returns False when the database was already seeded."""
    if db.query(User.id).first() is not None:
        logger.info("⚠️ Database already seeded, skipping")
        return False

    now = utc_now()
    try:
        add_all(db, [
            User(name=name, email=email, password=encrypt_password(password), role=role)
            for name, email, password, role in USERS
        ])
        countries = add_all(db, [
            Country(name=name, code=code, flag_url="image.jpg") for name, code in COUNTRIES
        ])
        positions = add_all(db, [Position(name=name) for name in POSITIONS])
        competitions = add_all(db, [
            Competition(name=name, code=code, logo_url="comp.jpg", type=kind)
            for name, code, kind in COMPETITIONS
        ])
        seasons = add_all(db, [
            Season(
                year=year,
                start=datetime(year, 1, 1),
                end=datetime(year, 12, 31),
                is_current=is_current,
            )
            for year, is_current in SEASONS
        ])
        teams = add_all(db, [
            Team(
                name=name,
                code=code,
                logo_url="logo.jpg",
                founding_date=datetime(1920, 1, 1),
                is_national=False,
                country_id=countries[0].id,
            )
            for name, code in TEAMS
        ])
        add_all(db, [
            Trophy(
                competition_id=competitions[competition].id,
                season_id=seasons[season].id,
                team_id=teams[team].id,
            )
            for competition, season, team in TROPHIES
        ])
        matches = add_all(db, [
            Match(
                competition_id=competitions[competition].id,
                home_team_id=teams[home].id,
                away_team_id=teams[away].id,
                season_id=seasons[season].id,
            )
            for competition, home, away, season in MATCHES
        ])
        players = add_all(db, [
            Player(
                name=name,
                date_of_birth=datetime(1990, 1, 1),
                height=1.8,
                weight=70,
                country_id=countries[1].id,
                position_id=positions[0].id,
                current_team_id=teams[0].id,
            )
            for name in PLAYERS
        ])
        add_all(db, [
            Transfer(
                player_id=players[player].id,
                previous_team_id=teams[previous].id,
                new_team_id=teams[new].id,
                fee=fee,
                date=now,
            )
            for player, previous, new, fee in TRANSFERS
        ])
        add_all(db, [
            MatchGoal(
                match_id=matches[0].id,
                team_id=teams[0].id,
                goalscorer_id=players[scorer].id,
                is_own_goal=is_own_goal,
                goal_timestamp=now,
            )
            for scorer, is_own_goal in GOALS
        ])
        db.commit()
    except Exception:
        db.rollback()
        logger.error("❌ Seeding failed, rolled back")
        raise

    logger.info("✅ Database seeded")
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    session = SessionLocal()
    try:
        seed_database(session)
    finally:
        session.close()
