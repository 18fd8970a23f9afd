#!/usr/bin/env python3
"""Post-deployment landing page check.

Opens BASE_URL in a real browser and verifies:
- BASE_URL is set and reachable
- The landing page renders
- The guest login option ("continue as guest") is offered

Run after each deployment to catch a broken landing page immediately.
"""

import asyncio
import os
import sys

from dotenv import load_dotenv

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from landing_check.config import Settings
from landing_check.exceptions import LandingCheckError, LoginOptionsMissingError
from landing_check.landing_page import GUEST_LOGIN_TEXT, check_landing_page


async def main():
    """Run the landing page check using the environment configuration."""
    load_dotenv()

    print("🔍 Landing Page Check")
    print("=" * 60)

    try:
        settings = Settings.from_env()
    except LandingCheckError as e:
        print(f"❌ {e}")
        sys.exit(1)

    print(f"🌐 BASE_URL: {settings.base_url}")
    print(f"🧭 Browser: {settings.browser_name} (headless={settings.headless})")
    print(f"⏱️  Timeout: {settings.timeout_ms:.0f} ms, wait until {settings.wait_until}")
    print()

    try:
        result = await check_landing_page(settings)
    except LoginOptionsMissingError as e:
        print(f"❌ {e}")
        sys.exit(1)
    except LandingCheckError as e:
        print(f"❌ {type(e).__name__}: {e}")
        sys.exit(1)

    print(f"✅ {result.url} (HTTP {result.status}) offers {GUEST_LOGIN_TEXT!r}")
    sys.exit(0)


if __name__ == "__main__":
    asyncio.run(main())
