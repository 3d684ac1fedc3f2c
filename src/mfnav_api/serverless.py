# Copyright (c)
# SPDX-License-Identifier: MIT
"""AWS Lambda / Netlify Functions entrypoint wrapping the FastAPI app via Mangum."""

from __future__ import annotations

from mangum import Mangum

from mfnav_api.main import app

# Lifespan runs once per cold start and opens the shared upstream HTTP client.
handler = Mangum(app, lifespan="auto")
