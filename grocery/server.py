import uvicorn

from grocery.api.api_run import app
from grocery.utilities.config import APP_HOST, APP_PORT, configure_logging


if __name__ == "__main__":
    configure_logging()
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on http://{APP_HOST}:{APP_PORT}/docs (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
