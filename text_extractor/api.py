import logging
from pathlib import Path

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import HTMLResponse

from text_extractor.builder import ServiceBuilder
from text_extractor.config import AppConfig
from text_extractor.core.errors import InputMissingError, InvalidInputError, ProviderError, SchemaViolationError
from text_extractor.core.extraction import ExtractTextFromImageInput, ExtractTextFromImageOutput
from text_extractor.core.image_reference import to_data_url
from text_extractor.logging_config import configure_logging

logger = logging.getLogger("text_extractor.api")

INDEX_HTML = Path(__file__).parent / "static" / "index.html"


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Factory function for creating the FastAPI app with config."""
    if config is None:
        config = AppConfig.from_yaml("config.yaml")
    configure_logging(config.log_level)

    service = ServiceBuilder(config).build()

    app = FastAPI(title="TextExtractor Pro")

    async def run_extraction(request: ExtractTextFromImageInput) -> ExtractTextFromImageOutput:
        try:
            return await service.extract_text_from_image(request)
        except (InputMissingError, InvalidInputError) as e:
            raise HTTPException(status_code=422, detail=str(e))
        except SchemaViolationError as e:
            raise HTTPException(status_code=502, detail=str(e))
        except ProviderError as e:
            raise HTTPException(status_code=502, detail=str(e))

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return HTMLResponse(INDEX_HTML.read_text(encoding="utf-8"))

    @app.post("/api/extract", response_model=ExtractTextFromImageOutput, response_model_by_alias=True)
    async def extract(request: ExtractTextFromImageInput):
        """Extract text from `{imageUrl}` (data URL or http(s) link)."""
        return await run_extraction(request)

    @app.post("/api/extract/upload", response_model=ExtractTextFromImageOutput, response_model_by_alias=True)
    async def extract_upload(file: UploadFile = File(...)):
        """Extract text from an uploaded image file."""
        data = await file.read(config.max_upload_bytes + 1)
        if not data:
            raise HTTPException(status_code=422, detail="Uploaded file is empty")
        if len(data) > config.max_upload_bytes:
            raise HTTPException(status_code=413, detail=f"Uploaded file exceeds {config.max_upload_bytes} bytes")
        logger.info(f"Upload received: filename={file.filename}, type={file.content_type}, bytes={len(data)}")
        return await run_extraction(ExtractTextFromImageInput(image_url=to_data_url(data, file.content_type)))

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
