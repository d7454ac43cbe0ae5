import uvicorn
from weekmenu.api.api_run import app
from weekmenu.utilities.config import APP_HOST, APP_PORT, DATA_DIR, LOG_LEVEL


if __name__ == "__main__":
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Weekly menu planner on http://localhost:{APP_PORT} (data in {DATA_DIR})")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
