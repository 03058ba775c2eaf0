from fastapi import FastAPI
from weather_app.routes.weather_route import router as weather_router

app = FastAPI(title="Weather Lookup")
app.include_router(weather_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Weather Lookup API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "search": "/weather/search?city=<name>",
            "coordinates": "/weather/coordinates?lat=<lat>&lon=<lon>",
            "location": "/weather/location",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Weather Lookup"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("weather_app.main:app", host="0.0.0.0", port=8000, reload=True)
