"""
caption-e2e browser scenarios.

This package contains the end-to-end cases for the caption generator,
driven through Playwright's async API.

Test Modules:
    - test_auth: Landing page, sign up, sign in and logout
    - test_dashboard: Dashboard load, empty prompt and sidebar
    - test_captions: Caption generation, copy and history

Configuration:
    - conftest.py: the ``case`` fixture, target check and failure screenshots
    - caption_e2e.config: E2E_* settings

Running Tests:
    # Run every scenario
    caption-e2e

    # Run one module with pytest directly
    pytest tests/e2e/test_auth.py

    # Run in headed mode against staging
    E2E_HEADLESS=false E2E_BASE_URL=https://staging.example.com pytest tests/e2e/

Environment Variables:
    E2E_BASE_URL: Application under test (default: http://localhost:3000)
    E2E_HEADLESS: Run in headless mode (default: true)
    E2E_BROWSER: chromium, firefox or webkit (default: chromium)
    E2E_REQUIRE_TARGET: Fail instead of skip when the target is down
"""
