"""로깅 설정 모듈.

Configures the root logger once with a console handler. Request level logs
go to Axiom through the middleware; this covers process events such as the
startup database ping and token activity.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """루트 로거를 설정합니다 (Configure the root logger, at most once)."""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
