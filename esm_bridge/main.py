from fastapi import FastAPI
import logging

from esm_bridge import __version__
from esm_bridge.api.routes import router
from esm_bridge.config import configure_logging, settings_from_env

app = FastAPI(title="esm-bridge", version=__version__)
app.include_router(router)
# Configure logging
configure_logging(settings_from_env())
logger = logging.getLogger(__name__)
