from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import settings


def build_engine(url: str, **options):
    """Create an engine, applying the SQLite specific connection settings when needed."""
    if url.startswith("sqlite"):
        options.setdefault("connect_args", {"check_same_thread": False})
        engine = create_engine(url, **options)

        # SQLite ignores foreign keys (and their cascades) unless asked per connection
        @event.listens_for(engine, "connect")
        def enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        url,
        pool_pre_ping=True,   # tests connections before using them
        pool_recycle=1800,    # recycle every 30 min to avoid stale connections
        **options
    )


engine = build_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

# Base class for models
Base = declarative_base()

# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def load_models():
    # Import all models here so they are registered on Base.metadata
    from app.users.models.user_model import User
    from app.country.models.country_model import Country
    from app.positions.models.position_model import Position
    from app.competitions.models.competition_model import Competition
    from app.seasons.models.seasons_model import Season
    from app.teams.models.team_model import Team
    from app.players.models.player_model import Player
    from app.matches.models.match_model import Match
    from app.match_goals.models.match_goal_model import MatchGoal
    from app.transfers.models.transfer_model import Transfer
    from app.trophies.models.trophy_model import Trophy


# Function to initialize the database
def init_db(bind=None):
    load_models()

    # Use context manager to ensure connection is released
    with (bind or engine).begin() as conn:
        Base.metadata.create_all(bind=conn)
