#!/usr/bin/env python3
"""
Verification script for panic recovery.
Boots the service in-process, mounts a route that always fails and checks:
1. JSON Problem Details response (default config)
2. XML Problem Details response with a custom type
3. Liveness probe still answers after a recovered fault
"""

import asyncio
import logging
import sys
import httpx
from src.main import create_app
from src.api.middleware.recoverer import RecovererConfig
from src.domains.problems.schemas import ResponseFormat

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("verify_recoverer")


def build_app(config: RecovererConfig | None = None):
    app = create_app(config)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("verification fault")

    return app


async def check(name: str, app, expected_content_type: str, must_contain: str) -> bool:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://verify") as client:
        response = await client.get("/boom")
        live = await client.get("/api/v1/health/live")

    ok = (
        response.status_code == 500
        and response.headers.get("content-type") == expected_content_type
        and must_contain in response.text
        and live.status_code == 200
    )
    if ok:
        logger.info(f"✅ {name}: {response.text.strip()}")
    else:
        logger.error(
            f"❌ {name}: status={response.status_code} "
            f"content-type={response.headers.get('content-type')} body={response.text!r}"
        )
    return ok


async def verify():
    logger.info("Starting panic recovery verification...")

    results = [
        await check(
            "json_default_type",
            build_app(),
            "application/problem+json",
            '"title":"Internal Server Error"',
        ),
        await check(
            "xml_custom_type",
            build_app(
                RecovererConfig(
                    response_format=ResponseFormat.XML,
                    problem_details_type="unexpected-error",
                    log_all_stack=False,
                )
            ),
            "application/problem+xml",
            "<type>unexpected-error</type>",
        ),
    ]

    if not all(results):
        logger.error("Verification FAILED")
        sys.exit(1)

    logger.info("All checks passed. 🚀")


if __name__ == "__main__":
    asyncio.run(verify())
