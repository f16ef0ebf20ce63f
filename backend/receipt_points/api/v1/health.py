from fastapi import APIRouter
from receipt_points.schemas.simple import Health

router = APIRouter()

@router.get('/health', response_model=Health)
def health():
    return {'status': 'ok'}
