# app/handlers/submission_handler.py
"""Handle form submissions for a session"""

from app.models import APIRequest, APIResponse, SubmissionSnapshot
from app.submission_controller import SubmissionController
import stages

async def handle_submission(request: APIRequest, controller: SubmissionController) -> APIResponse:
    """Validate the form and run the submission"""
    values = {"age": request.age, "size": request.size}

    errors = stages.validate_form(values)
    if errors:
        return handle_validation_error(request, controller, errors)

    parsed = stages.parse_form(values)
    snapshot = await controller.submit(parsed["age"], parsed["size"])
    return build_response(request, controller, snapshot)

def handle_validation_error(request: APIRequest, controller: SubmissionController, errors: dict) -> APIResponse:
    """Handle validation error"""
    return build_response(
        request,
        controller,
        controller.snapshot(),
        success=False,
        errors=errors,
        data={"form": stages.get_form()}
    )

def handle_reset(request: APIRequest, controller: SubmissionController) -> APIResponse:
    snapshot = controller.reset()
    return build_response(request, controller, snapshot, data={"form": stages.get_form()})

def handle_state(request: APIRequest, controller: SubmissionController) -> APIResponse:
    return build_response(request, controller, controller.snapshot())

def build_response(
    request: APIRequest,
    controller: SubmissionController,
    snapshot: SubmissionSnapshot,
    success: bool = True,
    errors: dict = None,
    data: dict = None
) -> APIResponse:
    return APIResponse(
        success=success,
        session_id=request.session_id,
        state=snapshot.state,
        human_age=snapshot.human_age,
        dog_fact=snapshot.dog_fact,
        error=snapshot.error,
        errors=errors or {},
        notifications=controller.drain_notifications(),
        data=data or {}
    )
