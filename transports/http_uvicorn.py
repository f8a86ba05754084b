"""HTTP transport running the SideEffects API under uvicorn."""

from __future__ import annotations

import uvicorn

from side_effects.settings import get_settings


if __name__ == "__main__":  # pragma: no cover - manual run helper
    settings = get_settings()
    uvicorn.run(
        "side_effects.api:init",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.dev_reload,
    )
