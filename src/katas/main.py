from fastapi import (
    FastAPI,
)
from fastapi.middleware.cors import CORSMiddleware

from katas.routers import get_routers
from katas.shared import Logger, load_config

config = load_config()

logger = Logger(__name__, level=config.logging.level).get_logger()


# ================================================================================
#       FastAPI Setup
# ================================================================================
app = FastAPI(title=config.general.title)

for router in get_routers():
    app.include_router(router)

origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ================================================================================
#       Server
# ================================================================================
def welcome():
    # Log server banner
    for line in config.general.title.split("\n"):
        logger.info(line)

    logger.info(f"Serving on {config.network.host}:{config.network.port}")


def serve():
    # The server is the only path that keeps a log file
    Logger(__name__, log_file=config.paths.logs, level=config.logging.level)

    welcome()

    import uvicorn

    uvicorn.run(
        "katas.main:app",
        host=config.network.host,
        port=config.network.port,
        reload=config.network.reload,
    )


if __name__ == "__main__":
    serve()
