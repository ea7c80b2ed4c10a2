from fastapi import HTTPException, Request, status   # Import FastAPI's built-in HTTPException class and standard HTTP status codes
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from src.utils.logger import logger             # Import the shared logger to log errors


# Raised when an emoji catalog cannot be read or validated
class CatalogError(Exception):
    pass


# A helper function to raise HTTP exceptions
def api_exception(detail: str, status_code: int):
    logger.error(f"{detail}")               # Log the error message for debugging/monitoring
    raise HTTPException(                    # Raise a FastAPI HTTPException
        status_code=status_code,            # Pass the HTTP status code (e.g., 404, 500)
        detail={"message": detail}          # Response body with only the error message (no extra code field)
    )

# function for "Not Found" (404) errors
def not_found(detail: str = "Resource not found"):
    return api_exception(detail, status.HTTP_404_NOT_FOUND)   # Calls api_exception with status 404

def server_error(detail: str = "Internal server error"):
    return api_exception(detail, status.HTTP_500_INTERNAL_SERVER_ERROR)


# Report undecodable request bodies as 400 instead of FastAPI's default 422
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    detail = f"Could not decode request: {problems}"
    logger.error(f"{request.method} {request.url.path} -> {detail}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": detail}},
    )
