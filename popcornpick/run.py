import uvicorn
from popcornpick.core.config import get_settings


def main() -> None:
    port = get_settings().PORT
    uvicorn.run("popcornpick.main:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
