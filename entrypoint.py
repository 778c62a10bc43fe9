"""Backend entrypoint. Starts uvicorn with host and port from env."""
import os
import uvicorn

from cycleledger.main import app


def main() -> None:
    port = int(os.environ.get("CYCLELEDGER_PORT", "8001"))
    host = os.environ.get("CYCLELEDGER_HOST", "127.0.0.1")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
