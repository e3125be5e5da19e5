import logging

from fastapi import FastAPI, HTTPException, Depends, status
from fastapi.responses import Response

from .dependencies import get_visualizer_service
from ..config import settings
from ..services.exceptions import StepperBusyError, UnknownStructureError
from ..services.visualizer import VisualizerService
from .schemas import (
    CommandRequest,
    CommandResponse,
    LogRead,
    StepperRead,
    StructureRead,
    SyntaxRead,
)

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="Data Structure Visualizer")


def _stepper_read(service: VisualizerService) -> StepperRead:
    current = service.stepper_status()
    return StepperRead(
        state=current.state.name,
        running=current.running,
        waiting=current.waiting,
        skipping=current.skipping,
        suspension_count=current.suspension_count,
        last_outcome=service.last_outcome,
    )

# --- Structures ---

@app.get("/structures/{structure}", response_model=StructureRead)
def get_structure(
    structure: str,
    service: VisualizerService = Depends(get_visualizer_service)
):
    """
    Everything the renderer needs for one structure: the latest frame,
    its tree layout (BST and heap), the console log and the stepper state.
    """
    try:
        frame = service.frame(structure)
        layout = service.layout(structure)
        logs = service.logs(structure)
    except UnknownStructureError as e:
        raise HTTPException(status_code=404, detail=str(e))

    # "dto" stands for Data Transfer Object.
    logs_dto = [
        LogRead(message=entry.message, severity=entry.severity, time=entry.time_label)
        for entry in logs
    ]

    return StructureRead(
        structure=frame.structure.value,
        frame=frame,
        layout=layout,
        logs=logs_dto,
        stepper=_stepper_read(service),
    )


@app.get("/structures/{structure}/syntax", response_model=SyntaxRead)
def get_syntax(
    structure: str,
    service: VisualizerService = Depends(get_visualizer_service)
):
    try:
        definition = service.definition(structure)
        return SyntaxRead(structure=structure, title=definition.title, commands=definition.syntax)
    except UnknownStructureError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post("/structures/{structure}/commands", response_model=CommandResponse)
async def submit_command(
    structure: str,
    command: CommandRequest,
    response: Response,
    service: VisualizerService = Depends(get_visualizer_service)
):
    """
    With `skip` the command runs to completion and its outcome is returned.
    Otherwise a paced run starts (202) and is driven through /stepper.
    """
    try:
        if command.skip:
            outcome = await service.run(structure, command.verb, command.args, skip=True)
            return CommandResponse(status=outcome.status.value, outcome=outcome)

        service.start(structure, command.verb, command.args)
        response.status_code = status.HTTP_202_ACCEPTED
        return CommandResponse(status="RUNNING")

    except UnknownStructureError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StepperBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))


@app.delete("/structures/{structure}/logs", status_code=status.HTTP_204_NO_CONTENT)
def clear_logs(
    structure: str,
    service: VisualizerService = Depends(get_visualizer_service)
):
    try:
        service.clear_logs(structure)
    except UnknownStructureError as e:
        raise HTTPException(status_code=404, detail=str(e))

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# --- Stepper ---

@app.get("/stepper", response_model=StepperRead)
def get_stepper(service: VisualizerService = Depends(get_visualizer_service)):
    return _stepper_read(service)


@app.post("/stepper/advance", response_model=StepperRead)
async def advance(service: VisualizerService = Depends(get_visualizer_service)):
    service.advance()
    return _stepper_read(service)


@app.post("/stepper/skip", response_model=StepperRead)
async def skip_to_end(service: VisualizerService = Depends(get_visualizer_service)):
    service.skip_to_end()
    return _stepper_read(service)
