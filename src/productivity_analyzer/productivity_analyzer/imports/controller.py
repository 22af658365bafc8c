from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import (
    CalculationOutOfRangeError,
    FileValidationError,
    InvalidDateError,
    InvalidTimeFormatError,
    RowValidationError,
    SpreadsheetParsingError,
)
from ..container import Container

logger = logging.getLogger(__name__)


def _error(message: str, status: int, details=None):
    body = {"success": False, "error": message}
    if details:
        body["details"] = details
    return jsonify(body), status


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(413)
    def upload_too_large(e):
        limit = app.config.get("MAX_CONTENT_LENGTH")
        details = f"Maximum upload size is {limit // (1024 * 1024)} MB" if limit else None
        return _error("File too large", 413, details)

    @app.route("/api/upload", methods=["POST"], endpoint="api_upload")
    def api_upload():
        file = request.files.get("file")
        if file is None or not file.filename:
            return _error("No file provided", 400, 'Request must include a file in form data with key "file"')

        try:
            summary = container.import_service.import_workbook(filename=file.filename, content=file.read())
        except (FileValidationError, SpreadsheetParsingError) as e:
            return _error(str(e), 400)
        except RowValidationError as e:
            return _error(str(e), 400, f"Error in Excel row {e.row_number}" if e.row_number else None)
        except (InvalidTimeFormatError, InvalidDateError, CalculationOutOfRangeError) as e:
            return _error("Data validation error", 400, str(e))
        except Exception as e:
            logger.exception("Upload of %s failed", file.filename)
            return _error("Internal server error", 500, str(e))

        return jsonify(
            {
                "success": True,
                "count": summary.record_count,
                "message": summary.message,
                "details": {
                    "employee_count": summary.employee_count,
                    "record_count": summary.record_count,
                    "month": summary.month,
                    "year": summary.year,
                },
            }
        ), 200

    @app.route("/api/upload", methods=["GET"], endpoint="api_upload_get")
    def api_upload_get():
        return _error("Method not allowed", 405, "This endpoint only accepts POST requests with Excel file upload")
