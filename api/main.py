"""
FastAPI application for the Commute Traffic API

This API serves the commute routes stored by the collector.
"""

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from api.aggregations import get_commute_summary, get_recent_routes, get_route_by_key
from src.database import get_db

# Create FastAPI app
app = FastAPI(
    title="Commute Traffic API",
    description="REST API for collected commute travel times",
    version="1.0.0",
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify your frontend domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """API root - health check"""
    return {"status": "ok", "name": "Commute Traffic API", "version": "1.0.0", "docs": "/docs"}


@app.get("/api/routes")
def get_routes(
    limit: int = Query(50, ge=1, le=500),
    summary: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Get the most recently collected routes

    Args:
        limit: Maximum number of routes (1-500, default: 50)
        summary: Filter by route summary label

    Returns:
        List of stored routes, newest first
    """
    return get_recent_routes(db, limit=limit, summary=summary)


@app.get("/api/routes/summary")
def get_routes_summary(days: int = Query(7, ge=1), db: Session = Depends(get_db)):
    """
    Get travel time statistics per route

    Args:
        days: Number of days to analyze (default: 7)

    Returns:
        Per-route observation counts and duration-in-traffic statistics
    """
    return get_commute_summary(db, days=days)


@app.get("/api/routes/{row_key}")
def get_route(row_key: str, db: Session = Depends(get_db)):
    """Get a single stored route by its row key"""
    result = get_route_by_key(db, row_key)
    if result.get("error"):
        raise HTTPException(status_code=404, detail=result["error"])
    return result


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
