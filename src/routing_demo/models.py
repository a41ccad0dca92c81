from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class JsonExample(BaseModel):
    title: str
    heading: str
    message: str
    imagePath: str


class SubmittedData(BaseModel):
    # значения возвращаются без преобразования типов
    name: Any = None
    email: Any = None
    agree: Any = None


class PostExampleResponse(BaseModel):
    status: str = "amazing success!"
    message: str = "congratulations on sending us this data!"
    your_data: SubmittedData


class UploadedFile(BaseModel):
    """Описание сохранённого на диск файла."""

    fieldname: str
    originalname: str
    encoding: str = "7bit"
    mimetype: Optional[str] = None
    destination: str
    filename: str
    path: str
    size: int


class UploadAccepted(BaseModel):
    status: Literal["all good"] = "all good"
    message: str = "files were uploaded!!!"
    files: List[UploadedFile] = Field(default_factory=list)


class UploadRejected(BaseModel):
    status: Literal["you fail!!!"] = "you fail!!!"
    message: str = "rejected your files... try harder"


# Оба варианта отдаются с кодом 200, различаются полем ``status``
UploadResult = Union[UploadAccepted, UploadRejected]


class DotenvError(BaseModel):
    success: Literal[False] = False
    error: str = (
        "Oops... In order to use the dotenv module, you must first make a file "
        "named .env on your server - see the .env.example file for example."
    )


class ParameterExampleResponse(BaseModel):
    status: str = "wonderful"
    message: str
    animalId: str
    animal: Any = None


class UpstreamErrorBody(BaseModel):
    name: str
    message: str
    code: Optional[str] = None
    status: Optional[int] = None
    url: Optional[str] = None
