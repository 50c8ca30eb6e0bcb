from __future__ import annotations

from fastapi import FastAPI

from .routes import catalog_router, simulation_router


def create_app() -> FastAPI:
    """
    Instantiate the FastAPI application and register routers.

    Creates the main FastAPI application with CORS middleware and
    registers the domain routers:
    - catalog: Read-only technology catalog and mission presets
    - simulation: Simulation execution

    Returns:
        FastAPI: Configured FastAPI application instance ready to serve.

    Example:
        ```python
        # Direct usage
        app = create_app()
        uvicorn.run(app, host="0.0.0.0", port=8000)

        # Or use the pre-created instance
        from psyche_power_sim.api.app import app
        ```
    """
    app = FastAPI(
        title="16 Psyche Power System Simulator API",
        version="0.1.0",
        description="API to run spacecraft power balance simulations on asteroid 16 Psyche.",
    )

    from fastapi.middleware.cors import CORSMiddleware

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(catalog_router)
    app.include_router(simulation_router)

    return app


app = create_app()
