import os
import uvicorn

if __name__ == "__main__":
    dev = os.environ.get("ENV", "dev") == "dev"
    port = int(os.environ.get("PORT", 8000))

    if dev:
        # Local dev with reload
        uvicorn.run("assessment.main:app", host="127.0.0.1", port=port, reload=True)
    else:
        uvicorn.run("assessment.main:app", host="0.0.0.0", port=port)
