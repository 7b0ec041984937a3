"""FastAPI主应用入口

对外暴露订单定价、订单生命周期操作和账本汇总
- 订单簿通过依赖注入获取
- 核心层抛出的异常在这里统一转换为HTTP响应
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1 import ledger_router, orders_router, pricing_router
from .config.settings import settings
from .errors import ContractViolation, OrderNotFound
from .utils.logging import get_logger, setup_logging

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

# 创建FastAPI应用实例
app = FastAPI(title=settings.APP_TITLE, description=settings.APP_DESCRIPTION, version=settings.APP_VERSION)

# 挂载API路由
app.include_router(orders_router, prefix="/api/v1")
app.include_router(pricing_router, prefix="/api/v1")
app.include_router(ledger_router, prefix="/api/v1")


@app.exception_handler(OrderNotFound)
async def order_not_found_handler(request: Request, exc: OrderNotFound):
    return JSONResponse(status_code=404, content={"detail": "Order not found"})


@app.exception_handler(ContractViolation)
async def contract_violation_handler(request: Request, exc: ContractViolation):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
def health():
    """健康检查"""
    return {"status": "ok"}
