from fastapi import APIRouter, Depends
from app.core.auth import get_principal
from app.auth.controllers.auth_controller import router as auth_router
from app.users.controllers.user_controller import router as users_router
from app.competitions.controllers.competition_controller import router as competitions_router
from app.country.controllers.country_controller import router as countries_router
from app.positions.controllers.position_controller import router as positions_router
from app.seasons.controllers.season_controller import router as seasons_router
from app.teams.controllers.team_controller import router as teams_router
from app.players.controllers.player_controller import router as players_router
from app.matches.controllers.match_controller import router as matches_router
from app.match_goals.controllers.match_goal_controller import router as match_goals_router
from app.transfers.controllers.transfer_controller import router as transfers_router
from app.trophies.controllers.trophy_controller import router as trophies_router

# Every route resolves the bearer token, so a bad token is a 401 even on public routes
api_router = APIRouter(prefix="/api/v1", dependencies=[Depends(get_principal)])

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(competitions_router, prefix="/competitions", tags=["competitions"])
api_router.include_router(countries_router, prefix="/countries", tags=["countries"])
api_router.include_router(positions_router, prefix="/positions", tags=["positions"])
api_router.include_router(seasons_router, prefix="/seasons", tags=["seasons"])
api_router.include_router(teams_router, prefix="/teams", tags=["teams"])
api_router.include_router(players_router, prefix="/players", tags=["players"])
api_router.include_router(matches_router, prefix="/matches", tags=["matches"])
api_router.include_router(match_goals_router, prefix="/matches", tags=["match-goals"])
api_router.include_router(transfers_router, prefix="/transfers", tags=["transfers"])
api_router.include_router(trophies_router, prefix="/trophies", tags=["trophies"])
