# app/main.py - Woof Years API
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from app.config import settings
from app.groq_service import groq_service
from app.age_converter import convert_dog_age_to_human_years
from app.errors import InvalidTransitionError
from app.models import APIRequest, APIResponse, ConvertRequest, ConvertResponse
from app.services.session_service import session_service
from app.handlers import submission_handler
import stages
import structlog

logger = structlog.get_logger()

ACTIONS = {
    "state": submission_handler.handle_state,
    "reset": submission_handler.handle_reset,
}

@asynccontextmanager
async def lifespan(app: FastAPI):
    await groq_service.initialize()
    yield
    session_service.clear()

app = FastAPI(title="Woof Years", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.post("/api/v1/woof-years", response_model=APIResponse)
async def woof_years_interaction(request: APIRequest):
    try:
        if not request.session_id or len(request.session_id) < 5:
            raise HTTPException(status_code=400, detail="Invalid session_id")

        controller = session_service.get_controller(request.session_id)

        if request.action == "submit":
            return await submission_handler.handle_submission(request, controller)
        if request.action in ACTIONS:
            return ACTIONS[request.action](request, controller)
        raise HTTPException(status_code=400, detail=f"Unknown action: {request.action}")

    except HTTPException:
        raise
    except InvalidTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.exception("Error in API", error=str(e), session_id=request.session_id)
        raise HTTPException(status_code=500, detail="Internal server error")

@app.post("/api/v1/convert", response_model=ConvertResponse)
async def convert(request: ConvertRequest):
    values = {"age": request.age, "size": request.size}
    errors = stages.validate_form(values)
    if errors:
        return ConvertResponse(success=False, errors=errors)

    parsed = stages.parse_form(values)
    return ConvertResponse(
        success=True,
        human_age=convert_dog_age_to_human_years(parsed["age"], parsed["size"])
    )

@app.get("/api/v1/form")
async def form():
    return {"fields": stages.get_form()}

@app.get("/")
async def root():
    return {"message": "Woof Years", "status": "active"}

@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "services": {
            "groq": "ready" if groq_service.is_ready() else "unavailable"
        },
        "sessions": len(session_service.sessions)
    }
