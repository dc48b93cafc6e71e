"""
Run the proxy with uvicorn: python -m badge_proxy
"""
import uvicorn

from badge_proxy.config import get_config


def main():
    config = get_config()
    uvicorn.run(
        "badge_proxy.main:app",
        host=config.listen_host,
        port=config.listen_port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
