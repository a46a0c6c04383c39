"""GIBS tile helper. GIBS is not behind api.nasa.gov; the frontend builds tile URLs itself."""

from fastapi import APIRouter

router = APIRouter()

GIBS_WMTS = "https://gibs.earthdata.nasa.gov/wmts/epsg4326/best"
TILE_SUFFIX = "default/{Time}/{TileMatrixSet}/{z}/{y}/{x}.jpg"

LAYERS = [
    ("MODIS_Terra_CorrectedReflectance_TrueColor", "MODIS Terra True Color"),
    ("VIIRS_CityLights_2012", "VIIRS City Lights"),
]


@router.get("/api/gibs/layers")
async def gibs_layers() -> dict:
    """Curated list of common layers with their WMTS tile templates."""
    return {
        "layers": [
            {"id": layer_id, "title": title, "template": f"{GIBS_WMTS}/{layer_id}/{TILE_SUFFIX}"}
            for layer_id, title in LAYERS
        ]
    }
