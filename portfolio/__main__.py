"""Run the API with uvicorn: ``python -m portfolio``."""
import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "portfolio.app:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
    )


if __name__ == "__main__":
    main()
