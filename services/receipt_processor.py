"""
Receipt processing against the JamAI Base "receipt" action table
Validates inputs, uploads images and reads back the extracted columns
"""

import os
import logging
from typing import Any, Dict, List, Optional

from clients.jamai_client import JamAIClient
from config.exceptions import (
    ReceiptExtractorError,
    ValidationError,
    TransportError,
    EnvironmentValidationError,
)
from config.settings import Settings
from services.models import (
    NOT_AVAILABLE,
    ExtractionResult,
    BatchResultEntry,
    ReceiptOutcome,
)

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.webp', '.gif')

TABLE_TYPE = 'action'
RECEIPT_TABLE_ID = 'receipt'
IMAGE_COLUMN = 'Image'
SHOP_NAME_COLUMN = 'Shop Name'
TOTAL_COLUMN = 'Total'


def is_supported_image(filename: str) -> bool:
    """Check the extension against the supported image formats (case-insensitive)"""
    return os.path.splitext(filename)[1].lower() in SUPPORTED_EXTENSIONS


def column_text(columns: Dict[str, Any], name: str) -> str:
    """Text of a row column, or N/A when the column is absent or empty"""
    column = columns.get(name)
    if not isinstance(column, dict):
        return NOT_AVAILABLE
    text = column.get('text')
    if text is None or text == '':
        return NOT_AVAILABLE
    return str(text)


class ReceiptProcessor:
    """Extract shop name and total from receipt images"""

    def __init__(self, settings: Settings, client: Optional[JamAIClient] = None):
        self.settings = settings
        self.client = client or JamAIClient(settings)

    def validate_environment(self) -> bool:
        """
        Check that the project has a "receipt" action table

        Raises:
            EnvironmentValidationError: if the table is absent
            TransportError: if the table listing could not be fetched
        """
        logger.info("Validating environment...")
        try:
            response = self.client.get('/tables', params={'table_type': TABLE_TYPE})
            if not isinstance(response, dict):
                raise TransportError("Table listing response is not an object", body=response)

            tables = response.get('tables') or []
            if not isinstance(tables, list):
                raise TransportError("Table listing response has no table list", body=response)

            table_exists = any(
                isinstance(table, dict) and table.get('table_id') == RECEIPT_TABLE_ID
                for table in tables
            )
            if not table_exists:
                raise EnvironmentValidationError(
                    f'Action table "{RECEIPT_TABLE_ID}" does not exist in your project'
                )
        except ReceiptExtractorError as e:
            logger.error(f"Environment validation failed: {e}")
            raise

        logger.info("Environment validation successful")
        return True

    def validate_image(self, image_path: str) -> bool:
        """
        Check that an image exists and has a supported extension

        Raises:
            ValidationError: if the file is missing or its format is unsupported
        """
        try:
            if not os.path.exists(image_path):
                raise ValidationError(f"Image not found: {image_path}")

            if not os.path.isfile(image_path):
                raise ValidationError(f"Not a regular file: {image_path}")

            if not is_supported_image(image_path):
                raise ValidationError(
                    f"Unsupported file format. Use: {', '.join(SUPPORTED_EXTENSIONS)}"
                )
        except ValidationError as e:
            logger.error(f"Image validation failed: {e}")
            raise

        logger.debug(f"Image validation passed for: {image_path}")
        return True

    def upload_file(self, file_path: str) -> Dict[str, Any]:
        """
        Upload an image to the file store

        Returns:
            Upload response; its "uri" references the stored file
        """
        logger.debug(f"Starting file upload: {file_path}")
        try:
            response = self.client.post_file('/files', file_path, field='file')
        except OSError as e:
            logger.error(f"File upload failed: {e}")
            raise ValidationError(f"Cannot read image {file_path}: {e}") from e
        except TransportError as e:
            logger.error(f"File upload failed: {e}")
            if e.status_code is not None:
                logger.error(f"Response status: {e.status_code}")
                logger.error(f"Response data: {e.body}")
            raise

        if not isinstance(response, dict) or not response.get('uri'):
            logger.error(f"File upload failed: no uri in response {response}")
            raise TransportError("Upload response did not contain a file uri", body=response)

        logger.debug(f"File uploaded successfully: {response['uri']}")
        return response

    def extract_fields(self, file_uri: str) -> ExtractionResult:
        """Add a row to the receipt table and read the extracted columns"""
        logger.debug("Extracting receipt information...")
        response = self.client.post_json('/tables/rows', {
            'table_type': TABLE_TYPE,
            'request': {
                'table_id': RECEIPT_TABLE_ID,
                'data': [{IMAGE_COLUMN: file_uri}],
                'stream': False,
            },
        })

        rows = response.get('rows') if isinstance(response, dict) else None
        if not isinstance(rows, list) or not rows or not isinstance(rows[0], dict):
            raise TransportError("Extraction response contained no rows", body=response)

        columns = rows[0].get('columns') or {}
        if not isinstance(columns, dict):
            raise TransportError("Extraction row columns are not an object", body=response)

        return ExtractionResult(
            shop_name=column_text(columns, SHOP_NAME_COLUMN),
            total=column_text(columns, TOTAL_COLUMN),
        )

    def process_receipt_outcome(self, image_path: str, check_environment: bool = True) -> ReceiptOutcome:
        """
        Run the full extraction flow for one image

        Args:
            image_path: Receipt image to process
            check_environment: Validate the backend first; batches do this once up front

        Returns:
            ReceiptOutcome holding either the result or the error message
        """
        filename = os.path.basename(image_path)
        try:
            if check_environment:
                self.validate_environment()
            self.validate_image(image_path)
            logger.info(f"Processing receipt: {filename}")

            file_response = self.upload_file(image_path)
            result = self.extract_fields(file_response['uri'])
        except ReceiptExtractorError as e:
            logger.error(f"Error processing receipt {filename}: {e}")
            return ReceiptOutcome.failure(filename, str(e) or e.__class__.__name__)

        logger.info(f"Processing complete for: {filename}")
        return ReceiptOutcome.success(filename, result)

    def process_receipt(self, image_path: str) -> Optional[ExtractionResult]:
        """Process one receipt; None means this receipt failed"""
        return self.process_receipt_outcome(image_path).result

    def collect_batch_outcomes(self, folder_path: str) -> List[ReceiptOutcome]:
        """
        Process every supported image in a folder, one at a time

        Files are visited in name order. Failures of individual files are
        returned as failed outcomes; an invalid environment or unreadable
        folder raises.
        """
        self.validate_environment()
        logger.info(f"Starting batch processing for folder: {folder_path}")

        try:
            entries = sorted(os.listdir(folder_path))
        except OSError as e:
            raise ValidationError(f"Cannot read folder {folder_path}: {e}") from e

        outcomes = []
        for entry in entries:
            if not is_supported_image(entry):
                logger.debug(f"Skipping unsupported file: {entry}")
                continue
            outcome = self.process_receipt_outcome(
                os.path.join(folder_path, entry), check_environment=False
            )
            outcomes.append(outcome)

        return outcomes

    def process_receipt_batch(self, folder_path: str) -> List[BatchResultEntry]:
        """Process a folder of receipts; only successful files are returned"""
        try:
            outcomes = self.collect_batch_outcomes(folder_path)
        except ReceiptExtractorError as e:
            logger.error(f"Batch processing failed: {e}")
            return []

        results = [
            BatchResultEntry.from_result(outcome.filename, outcome.result)
            for outcome in outcomes
            if outcome.ok
        ]

        logger.info(f"Batch processing completed. {len(results)} receipts processed")
        return results
