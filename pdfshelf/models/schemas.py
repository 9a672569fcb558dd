from pydantic import BaseModel, ConfigDict, Field

SUCCESS_STATUS = "success"


class FileRecord(BaseModel):
    """A stored document as listed by the storage endpoint.

    Attributes:
        stored_file_name: Name the endpoint stored the file under.
        uploader_name: Name given by the uploader.
        timestamp: Upload time as an ISO-8601 string.
        drive_file_id: Remote file identifier used to download the document.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    stored_file_name: str = Field(..., alias="StoredFileName")
    uploader_name: str = Field(..., alias="UploaderName")
    timestamp: str = Field(..., alias="Timestamp")
    drive_file_id: str = Field(..., alias="DriveFileID")


class FileListResponse(BaseModel):
    """Response body of the list endpoint."""

    status: str = ""
    files: list[FileRecord] = Field(default_factory=list)
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS_STATUS


class UploadPayload(BaseModel):
    """Request body for the upload endpoint.

    Attributes:
        uploader_name: Who is uploading.
        original_file_name: Name of the file on the uploader's machine.
        file_content: Base64 file content without any data-URL prefix.
    """

    model_config = ConfigDict(populate_by_name=True)

    uploader_name: str = Field(..., min_length=1, alias="uploaderName")
    original_file_name: str = Field(..., alias="originalFileName")
    file_content: str = Field(..., alias="fileContent")


class UploadResponse(BaseModel):
    """Response body of the upload endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = ""
    file_name: str | None = Field(None, alias="fileName")
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS_STATUS
