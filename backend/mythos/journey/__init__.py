"""Journey package: submissions, verification and standings."""
from .service import JourneyService
from .router import router as journey_router, get_journey_service

__all__ = [
    'JourneyService',
    'journey_router',
    'get_journey_service',
]
