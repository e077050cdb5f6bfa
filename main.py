"""
Main entry point for the Receipt Extractor
Processes a single receipt image or every image in a folder
"""

import os
import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
sys.path.append(str(Path(__file__).parent))

from config.exceptions import ConfigurationError
from config.logging_config import setup_logging
from config.settings import load_settings
from services.models import ExtractionResult, BatchResultEntry
from services.receipt_processor import ReceiptProcessor

logger = logging.getLogger(__name__)

USAGE = "Usage: python main.py <path-to-receipt-image-or-folder>"


def print_receipt(result: ExtractionResult) -> None:
    logger.info("RECEIPT PROCESSING RESULT:")
    logger.info("-" * 40)
    logger.info(f"Shop Name: {result.shop_name}")
    logger.info(f"Total: {result.total}")
    logger.info("-" * 40)


def print_batch_summary(results: List[BatchResultEntry], total_files: int) -> None:
    logger.info("BATCH PROCESSING SUMMARY:")
    logger.info("=" * 40)

    for index, result in enumerate(results, start=1):
        logger.info(f"Result {index}:")
        logger.info(f"File: {result.filename}")
        logger.info(f"Shop Name: {result.shop_name}")
        logger.info(f"Total: {result.total}")
        logger.info("-" * 40)

    logger.info(f"Successfully processed {len(results)} of {total_files} files")
    logger.info("=" * 40)


def run(processor: ReceiptProcessor, input_path: str) -> int:
    """Dispatch a path to single or batch processing and print the outcome"""
    if not os.path.exists(input_path):
        logger.error(f"Input path not found: {input_path}")
        return 1

    if os.path.isfile(input_path):
        result = processor.process_receipt(input_path)
        if result is not None:
            print_receipt(result)
        else:
            logger.error("Failed to process receipt")
    elif os.path.isdir(input_path):
        results = processor.process_receipt_batch(input_path)
        print_batch_summary(results, len(os.listdir(input_path)))
    else:
        logger.error("Input path is neither a file nor a directory")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    parser = argparse.ArgumentParser(
        description="Extract shop name and total from receipt images"
    )
    parser.add_argument('path', nargs='?', help='Receipt image or folder of images')
    args = parser.parse_args(argv)

    if not args.path:
        # no log file for a usage error
        logger.error(USAGE)
        return 1

    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.error(f"Application error: {e}")
        return 1

    log_file = setup_logging(settings.log_level, settings.log_dir)
    logger.debug(f"Logging to {log_file}")

    try:
        processor = ReceiptProcessor(settings)
        try:
            return run(processor, args.path)
        finally:
            processor.client.close()
    except Exception as e:
        logger.error(f"Application error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
