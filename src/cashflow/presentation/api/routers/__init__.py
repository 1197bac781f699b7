from cashflow.presentation.api.routers.cash_flow import router as cash_flow_router

__all__ = ["cash_flow_router"]
