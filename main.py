from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

import config
from course_recommendation.routes import router as recommendation_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Course Recommendation API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recommendation_router)

logger.info(f"🌐 Course Recommendation API starting (environment: {config.APP_ENV})")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"🚀 Serving on {config.HOST}:{config.PORT}")
    logger.info(f"🔗 Health check: http://localhost:{config.PORT}/api/health")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
