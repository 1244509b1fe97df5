import logging
from fastapi import FastAPI, HTTPException
from geocountry.config import settings
from geocountry.geoip import get_country

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("main")

app = FastAPI(debug=settings.debug)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/country")
async def country():
    try:
        code = await get_country()
    except Exception as e:
        logger.warning(f"Country lookup unavailable: {e!r}")
        raise HTTPException(status_code=502, detail="Geolocation service unavailable")
    return {"country": code}
