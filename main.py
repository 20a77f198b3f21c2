import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from calculator import CalculationError, MetricsCalculator
from config import LOG_LEVEL, TEMPLATES_DIR
from forms import ACTIVITY_OPTIONS, FormError, build_input, normalized_fields

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI()
templates = Jinja2Templates(directory=TEMPLATES_DIR)
calculator = MetricsCalculator()


def render_form(request: Request, values=None, errors=None, error=None, status_code=200):
    return templates.TemplateResponse(
        request,
        "form.html",
        {
            "values": values or {},
            "errors": errors or {},
            "error": error,
            "activity_options": ACTIVITY_OPTIONS,
        },
        status_code=status_code,
    )


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return render_form(request)


@app.post("/calculate", response_class=HTMLResponse)
async def calculate_view(request: Request):
    form = await request.form()
    fields = dict(form)
    values = normalized_fields(fields)
    values["use_current_weight"] = bool(fields.get("use_current_weight"))

    try:
        data = build_input(fields)
    except FormError as e:
        logger.info("Rejected form: %s", e)
        return render_form(request, values=values, errors=e.errors, status_code=400)

    try:
        result = calculator.compute(data)
    except CalculationError as e:
        logger.warning("Calculation failed: %s", e)
        return render_form(
            request,
            values=values,
            error=f"Could not calculate results: {e}",
            status_code=400,
        )

    return templates.TemplateResponse(
        request,
        "results.html",
        {"data": data, "result": result},
    )
