"""FastAPI application serving aggregated application logs."""

from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel
import uvicorn

from . import __version__
from .client import Client, ClientOption
from .errors import BackendTimeoutError, NotFoundError, UnexpectedBackendFault
from .log import Selector


# Pydantic models
class LogRecordModel(BaseModel):
    id: str
    timestamp: str
    source: str
    process: str
    message: str


class LogsResponse(BaseModel):
    app_name: str
    logs: List[LogRecordModel]


_client: Optional[Client] = None


def get_client() -> Client:
    """Lazily create the shared AWS log client."""
    global _client
    if _client is None:
        try:
            _client = Client(ClientOption())
        except ValueError as e:
            # Invalid APPLOGS_* setting
            raise HTTPException(status_code=500, detail=str(e))
    return _client


app = FastAPI(
    title="applogs API",
    description="Build and deployment logs of deployed applications",
    version=__version__,
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "applogs API is running", "version": __version__}


@app.get("/apps/{app_name}/logs", response_model=LogsResponse)
def get_logs(
    app_name: str,
    source: str = Query("", description="Log source filter"),
    process: str = Query("", description="Process filter: builder or deployer"),
    client: Client = Depends(get_client),
):
    """Return the application's logs sorted by timestamp."""
    try:
        records = client.describe_logs(app_name, Selector(source=source, process=process))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BackendTimeoutError as e:
        raise HTTPException(status_code=504, detail=str(e))
    except UnexpectedBackendFault as e:
        raise HTTPException(status_code=502, detail=str(e))

    return LogsResponse(
        app_name=app_name,
        logs=[LogRecordModel(**record.to_dict()) for record in records],
    )


def run(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Serve the API with uvicorn."""
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
