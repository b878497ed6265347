from pydantic import BaseModel, ConfigDict, Field


class ExtractTextFromImageInput(BaseModel):
    """Input schema of the extraction prompt: `{imageUrl: string}`."""

    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(
        alias="imageUrl",
        description="The URL of the image to extract text from.",
    )


class ExtractTextFromImageOutput(BaseModel):
    """Output schema of the extraction prompt: `{extractedText: string}`."""

    model_config = ConfigDict(populate_by_name=True, strict=True)

    extracted_text: str = Field(
        alias="extractedText",
        description="The extracted text from the image.",
    )
