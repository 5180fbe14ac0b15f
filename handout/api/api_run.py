from fastapi import (
    FastAPI,
    Request,
    Query,
    Form,
    Depends,
    HTTPException,
    Response,
)
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from datetime import datetime, date as _date
from typing import Optional
import logging

from handout.domain.exceptions import PlanValidationError
from handout.infra.pdf_utils import generate_pdf_for_handout
from handout.logic.plan.session import HandoutSession
from handout.logic.rendering.views import render_handout
from handout.logic.selection.matcher import find_med_by_name
from handout.utilities.config import DATE_FORMAT, DEBUG, IMAGES_DIR, STATIC_DIR, TEMPLATES_DIR
from handout.utilities.constants import PRINT_EMPTY_CONFIRM_MESSAGE
from handout.utilities.validators import (
    MedicationOut,
    PlanEntryInput,
    PlanEntryOut,
    SelectionInput,
)

# Logging
logger = logging.getLogger("handout_app")

# Initialize FastAPI app
app = FastAPI(title="Medication Handout Builder", debug=DEBUG)

# Static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
# Catalog image paths are relative (images/<file>.png)
app.mount("/images", StaticFiles(directory=str(IMAGES_DIR), check_dir=False), name="images")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_session: Optional[HandoutSession] = None


async def get_session() -> HandoutSession:
    """Single-user app: one session per process, created on first use."""
    global _session
    if _session is None:
        _session = await HandoutSession.start()
    return _session


@app.on_event("startup")
async def _startup_session():
    """Load the catalog and restore the draft before the first request."""
    session = await get_session()
    logger.info("Handout session ready: %d medications, %d plan entries",
                len(session.state.meds), len(session.state.treatment_plan))


def _ts() -> int:
    """Cache-busting timestamp for static assets."""
    return int(datetime.now().timestamp())


def _today() -> str:
    return _date.today().strftime(DATE_FORMAT)


def _home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def _render_index(request: Request, session: HandoutSession, form: Optional[dict] = None,
                  error_message: Optional[str] = None, status_code: int = 200):
    """Main page; `form` re-fills the search box and text areas with what was typed."""
    state = session.state
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "today": _today(),
            "med_names": state.med_names,
            "selected": state.selected,
            "form": form,
            "medication_list_html": session.views["list"],
            "handout_html": session.views["handout"],
            "error_message": error_message,
            "time": _ts(),
        },
        status_code=status_code,
    )


# -------------------- UI PAGES --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request, session: HandoutSession = Depends(get_session)):
    return _render_index(request, session)


@app.post("/select", response_class=HTMLResponse)
def select_medication(
    request: Request,
    med_search: str = Form(""),
    directions: str = Form(""),
    instructions: str = Form(""),
    notes: str = Form(""),
    session: HandoutSession = Depends(get_session),
):
    """Update the preview and keep whatever was typed in the entry fields."""
    session.select(med_search)
    form = {"med_search": med_search, "directions": directions,
            "instructions": instructions, "notes": notes}
    return _render_index(request, session, form=form)


@app.post("/plan")
def add_to_plan(
    request: Request,
    med_search: Optional[str] = Form(None),
    directions: str = Form(""),
    instructions: str = Form(""),
    notes: str = Form(""),
    session: HandoutSession = Depends(get_session),
):
    try:
        session.add(directions, instructions, notes, med_search=med_search)
    except PlanValidationError as e:
        logger.info("Rejected plan entry: %s", e.message)
        form = {"med_search": med_search or "", "directions": directions,
                "instructions": instructions, "notes": notes}
        return _render_index(request, session, form=form, error_message=e.message, status_code=400)
    return _home()


@app.post("/plan/{entry_id}/remove")
def remove_from_plan(entry_id: int, session: HandoutSession = Depends(get_session)):
    session.remove(entry_id)
    return _home()


@app.post("/clear")
def clear_plan(session: HandoutSession = Depends(get_session)):
    session.clear_all()
    return _home()


@app.get("/print", response_class=HTMLResponse)
def print_page(request: Request, confirm: int = Query(default=0),
               session: HandoutSession = Depends(get_session)):
    state = session.state
    if state.is_empty and not confirm:
        return templates.TemplateResponse(
            request,
            "confirm_print.html",
            {"message": PRINT_EMPTY_CONFIRM_MESSAGE, "time": _ts()},
        )
    return templates.TemplateResponse(
        request,
        "print.html",
        {
            "today": _today(),
            "handout_html": render_handout(state.treatment_plan, removable=False),
            "time": _ts(),
        },
    )


@app.get("/handout.pdf")
def handout_pdf(session: HandoutSession = Depends(get_session)):
    pdf = generate_pdf_for_handout(session.state.treatment_plan, today=_today())
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": 'inline; filename="medication_handout.pdf"'},
    )


# -------------------- API: Catalog & selection --------------------
@app.get("/api/medications")
def api_medications(session: HandoutSession = Depends(get_session)):
    meds = [MedicationOut(**m.to_dict()) for m in session.state.meds]
    return {"count": len(meds), "medications": meds, "names": session.state.med_names}


@app.get("/api/medications/search")
def api_search_medication(q: str = Query(default=""), session: HandoutSession = Depends(get_session)):
    """Lookup only; the current selection is not changed."""
    med = find_med_by_name(session.state.meds, q)
    return {"query": q, "match": MedicationOut(**med.to_dict()) if med else None}


@app.post("/api/select")
def api_select(payload: SelectionInput, session: HandoutSession = Depends(get_session)):
    med = session.select(payload.med_search)
    return {"selected": MedicationOut(**med.to_dict()) if med else None}


# -------------------- API: Treatment plan --------------------
def _plan_payload(session: HandoutSession) -> dict:
    state = session.state
    return {
        "count": len(state.treatment_plan),
        "treatmentPlan": [PlanEntryOut(**e.to_dict()) for e in state.treatment_plan],
        "selected": MedicationOut(**state.selected.to_dict()) if state.selected else None,
    }


@app.get("/api/plan")
def api_plan(session: HandoutSession = Depends(get_session)):
    return _plan_payload(session)


@app.post("/api/plan", status_code=201)
def api_add_to_plan(payload: PlanEntryInput, session: HandoutSession = Depends(get_session)):
    try:
        entry = session.add(payload.directions, payload.instructions, payload.notes,
                            med_search=payload.med_search)
    except PlanValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return {"entry": PlanEntryOut(**entry.to_dict()), "count": len(session.state.treatment_plan)}


@app.delete("/api/plan/{entry_id}")
def api_remove_from_plan(entry_id: int, session: HandoutSession = Depends(get_session)):
    removed = session.remove(entry_id)
    return {"removed": removed, "count": len(session.state.treatment_plan)}


@app.delete("/api/plan")
def api_clear_plan(session: HandoutSession = Depends(get_session)):
    session.clear_all()
    return {"count": 0}
