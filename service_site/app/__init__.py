"""
Content Site Service package.

Serves the marketing site's news section from a headless CMS and keeps
its content cache fresh through tag/path revalidation.

Structure:
- app.main: FastAPI app, routes, and service wiring.
- app.adapters: HTTP client for the headless CMS.
- app.caching: Tag-based content cache.
- app.content: Content record models and cached news queries.
- app.rendering: Portable Text and page renderers.
- app.revalidation: Client that triggers cache revalidation.
- app.schemas: CMS content-type definitions.
"""
