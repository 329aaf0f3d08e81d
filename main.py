# main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from starlette_graphene3 import GraphQLApp, make_playground_handler

from jobboard.api.routes import router, install_error_handlers
from jobboard.board import JobBoard
from jobboard.config import Settings
from jobboard.db.database import make_engine, make_session_factory, prepare_database
from jobboard.gql.schema import schema

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    if settings.app_env == "development":
        log.info("Running in DEVELOPMENT mode.")
    else:
        log.info("Running in PRODUCTION mode.")

    engine = make_engine(settings.db_url)
    session_factory = make_session_factory(engine)

    app = FastAPI(title="SL Youth Jobs")
    app.state.settings = settings
    app.state.board = JobBoard.from_session_factory(session_factory, settings.secret_key, settings.algorithm)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def startup_event():
        prepare_database(engine, session_factory, seed_samples=settings.seed_sample_data)

    @app.on_event("shutdown")
    def shutdown_event():
        engine.dispose()

    # --- Redirect from / to /graphql ---
    @app.get("/", include_in_schema=False)
    async def redirect_to_graphql():
        """
        Redirects the root path to the GraphQL Playground.
        """
        return RedirectResponse(url="/graphql", status_code=307)

    @app.get("/api/v1/system/readiness")
    def readiness():
        return {"status": "ready"}

    # --- REST endpoints ---
    install_error_handlers(app)
    app.include_router(router)

    # --- GraphQL ---
    app.mount("/graphql", GraphQLApp(schema=schema, on_get=make_playground_handler()))
    return app

