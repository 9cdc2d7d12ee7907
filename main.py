"""
Entry point for the Blog Posts Backend
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from blog_api.app import create_app
from blog_api.config.settings import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Blog Posts Backend on port {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
