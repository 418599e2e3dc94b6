from fastapi import APIRouter, HTTPException, Request

from stockcheck.errors import LookupValidationError
from stockcheck.schemas.lookup import LookupRequest
from stockcheck.services.form import validate_lookup_form
from stockcheck.services.presentation import build_dashboard

router = APIRouter()


@router.post('/lookup')
def lookup(req: LookupRequest, request: Request):
    try:
        symbol, purchase_date, units = validate_lookup_form(req)
    except LookupValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc

    service = request.app.state.get_lookup_service()
    outcome = service.resolve_data(symbol, purchase_date, units)
    return build_dashboard(outcome).model_dump(mode='json')


@router.get('/metrics/lookup')
def lookup_metrics(request: Request):
    return request.app.state.get_lookup_service().metrics()
