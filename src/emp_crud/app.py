# src/emp_crud/app.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.emp_crud.utils.error_handler import custom_exception_handler
from src.emp_crud.routes.emp_api import router as emps_router

app = FastAPI(title="emp-crud", version="1.0")

# ----------------------------------------------------------
# CUSTOM ERROR HANDLERS
# ----------------------------------------------------------
# 1) HTTPException (routing 404 and the ones we raise)
app.add_exception_handler(StarletteHTTPException, custom_exception_handler)

# 2) Validation errors
app.add_exception_handler(RequestValidationError, custom_exception_handler)

# 3) Catch-all
app.add_exception_handler(Exception, custom_exception_handler)

# ----------------------------------------------------------
# ROUTERS
# ----------------------------------------------------------
app.include_router(emps_router)


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok"}
