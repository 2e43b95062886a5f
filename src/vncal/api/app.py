from fastapi import FastAPI
from vncal.api.public import router as public_router

app = FastAPI(title="vncal public api")
app.include_router(public_router)
