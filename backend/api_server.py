"""
Local development server.

Serves the Lambda pipeline over plain HTTP so it can be exercised without
API Gateway. Every request, whatever its method or path, is turned
into a REST API (v1) proxy event and handed to lambda_handler.process_event.
"""

from typing import Any, Dict

from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool

# Load environment variables before the handler reads them
load_dotenv()

from lambda_handler import process_event  # noqa: E402

VERSION = "1.0.0"

app = FastAPI(
    title="Gateway App (local)",
    description="Local HTTP front for the API Gateway Lambda pipeline",
    version=VERSION,
)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


async def build_proxy_event(request: Request) -> Dict[str, Any]:
    """Translate an incoming HTTP request into an API Gateway v1 proxy event."""
    body = await request.body()
    return {
        "httpMethod": request.method,
        "path": request.url.path,
        "headers": dict(request.headers),
        "queryStringParameters": dict(request.query_params) or None,
        "body": body.decode("utf-8", errors="replace") if body else None,
        "isBase64Encoded": False,
        "requestContext": {
            "identity": {
                "sourceIp": request.client.host if request.client else None,
                "userAgent": request.headers.get("user-agent"),
            },
        },
    }


@app.api_route("/{path:path}", methods=PROXY_METHODS)
async def proxy(request: Request):
    event = await build_proxy_event(request)
    result = await run_in_threadpool(process_event, event)
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result["headers"],
    )


# Run with: uvicorn api_server:app --reload --port 8000
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api_server:app", host="0.0.0.0", port=8000, reload=True)
