import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from grocery.api.routes import data, grocery, ingredients, recipes
from grocery.domain.errors import PersistenceError

# Logging
logger = logging.getLogger("grocery_app")

# Initialize FastAPI app
app = FastAPI(title="Grocery List & Recipe Catalog API")

# Include routers
app.include_router(ingredients.router)
app.include_router(recipes.router)
app.include_router(grocery.router)
app.include_router(data.router)


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/api/health")
def health():
    return {"status": "ok"}
