"""
Neon E-Shop storefront package.

- cart: line items, pricing/promo engine, storage, store, presentation, events
- catalog: demo products with filter/sort rules
- routers: FastAPI page and JSON endpoints
- app: application factory wiring one cart store per process
"""

__version__ = "1.0.0"
