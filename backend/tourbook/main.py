from fastapi import FastAPI

from tourbook.core.logging import init_logging
from tourbook.routers.bookings import router as bookings_router
from tourbook.routers.payments import router as payments_router
from tourbook.routers.search import router as search_router
from tourbook.routers.tours import router as tours_router

init_logging()

app = FastAPI(title="Tourbook Travel API")
app.include_router(search_router, prefix="/api", tags=["search"])
app.include_router(tours_router, prefix="/api", tags=["tours"])
app.include_router(payments_router, prefix="/api", tags=["payments"])
app.include_router(bookings_router, prefix="/api", tags=["bookings"])


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}
