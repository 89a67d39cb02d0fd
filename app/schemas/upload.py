from app.schemas.base import CamelModel


class UploadResponse(CamelModel):
    file_path: str
