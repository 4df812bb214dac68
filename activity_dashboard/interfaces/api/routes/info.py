from fastapi import APIRouter

from activity_dashboard.config import get_settings
from activity_dashboard.interfaces.api.schemas import ServiceInfoRead

DASHBOARD_TITLE = "Activities & Programs Dashboard"

router = APIRouter(tags=["info"])


@router.get("/", response_model=ServiceInfoRead)
def read_service_info() -> ServiceInfoRead:
    settings = get_settings()
    return ServiceInfoRead(
        school_name=settings.school_name,
        title=DASHBOARD_TITLE,
        reporting_window=settings.reporting_window,
    )
