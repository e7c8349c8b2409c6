"""
OKLCH Color Converter - FastAPI implementation
Serves OKLCH / RGB / HEX conversion over HTTP and as MCP tools
"""

import logging
import sys
from pathlib import Path
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for package imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

import settings
from routers import convert_router

app = FastAPI(
    title="OKLCH Color Converter",
    description="Convert colors between OKLCH, RGB and HEX",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(convert_router)

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
