"""Document endpoints module.

This module provides Flask routes for uploading, listing and deleting a user's
resume and job description.
"""

import logging
from typing import List, Tuple

from flask import Blueprint, Response, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from pydantic import Field

from interview_prep.src.api.schemas import CamelModel, DocumentSummaryModel
from interview_prep.src.services import DocumentService

logger = logging.getLogger(__name__)


class UploadResponseModel(CamelModel):
    """Upload response model."""

    message: str
    document: DocumentSummaryModel


class DocumentListResponseModel(CamelModel):
    """Document list response model."""

    documents: List[DocumentSummaryModel] = Field(default_factory=list)


def init_document_routes(document_service: DocumentService) -> Blueprint:
    """Initialize document routes with the provided service.

    Args:
        document_service: Service managing uploaded documents.

    Returns:
        Blueprint: Flask blueprint with configured document routes.
    """
    documents_bp = Blueprint("documents", __name__)

    @documents_bp.route("/documents/upload", methods=["POST"])
    @jwt_required()
    def upload_document() -> Tuple[Response, int]:
        """Upload a PDF as the user's resume or job description.

        Expects multipart form data with a `file` and a `type` field.
        """
        user_id: str = get_jwt_identity()
        uploaded = request.files.get("file")
        doc_type = request.form.get("type", "")

        file_bytes = uploaded.read() if uploaded else None
        filename = (uploaded.filename or "document.pdf") if uploaded else ""
        mimetype = uploaded.mimetype if uploaded else None
        logger.info(f"Upload of {doc_type} '{filename}' by user {user_id}")

        document = document_service.upload(
            user_id=user_id,
            file_bytes=file_bytes,
            filename=filename,
            mimetype=mimetype,
            doc_type=doc_type,
        )
        response = UploadResponseModel(
            message="Document uploaded successfully",
            document=DocumentSummaryModel.from_document(document),
        )
        return jsonify(response.to_dict()), 201

    @documents_bp.route("/documents/list", methods=["GET"])
    @jwt_required()
    def list_documents() -> Response:
        """List the user's documents, newest first."""
        documents = document_service.list_documents(get_jwt_identity())
        response = DocumentListResponseModel(
            documents=[DocumentSummaryModel.from_document(doc) for doc in documents]
        )
        return jsonify(response.to_dict())

    @documents_bp.route("/documents/<document_id>", methods=["DELETE"])
    @jwt_required()
    def delete_document(document_id: str) -> Response:
        """Delete one of the user's documents."""
        document_service.delete_document(get_jwt_identity(), document_id)
        return jsonify({"message": "Document deleted successfully"})

    return documents_bp
