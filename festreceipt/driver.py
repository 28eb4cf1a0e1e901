"""Driver module for festreceipt."""

from pathlib import Path
import logging
from concurrent.futures import (
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from .config.loader import load_config
from .config.model import AppConfig, Donation
from .generate import preview_donation
from .io.donations import read_donations
from .io.files import write_pdf
from .services.workers import render_receipt_pdf

# Configure logging
logger = logging.getLogger(__name__)


def generate(config: AppConfig, donations: list[Donation] | None = None) -> list[Path]:
    """Generate receipts for donations based on the provided configuration.

    Donations are read from the configured input file unless given.
    """
    logger.info("Starting the generation process.")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Configuration: %s", config)

    if donations is None:
        if config.input is None:
            logger.error("No donations input configured.")
            raise ValueError("An [input] section with a 'path' is required.")
        donations = read_donations(config.input.path, config.input.sheet)

    if not donations:
        logger.warning("No donations to generate receipts for.")
        return []

    receipt_config = config.receipt_config()
    output_dir = Path(config.output.path)
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info(f"Generating {len(donations)} receipts into {output_dir}.")

    paths: list[Path] = []
    with logging_redirect_tqdm():
        with ProcessPoolExecutor() as executor:
            futures = [
                executor.submit(
                    render_receipt_pdf, donation, receipt_config, config.fonts
                )
                for donation in donations
            ]

            with ThreadPoolExecutor() as thread_executor:
                futures_pdfs = []
                for future in tqdm(
                    as_completed(futures),
                    total=len(futures),
                    desc="Generating Receipts",
                    leave=False,
                ):
                    filename, pdfbytes = future.result()
                    futures_pdfs.append(
                        thread_executor.submit(
                            write_pdf, output_dir / filename, pdfbytes
                        )
                    )

                for future in tqdm(
                    as_completed(futures_pdfs),
                    total=len(futures_pdfs),
                    desc="Saving Receipts",
                    leave=False,
                ):
                    paths.append(future.result())

    logger.info("Receipts generated successfully.")
    return sorted(paths)


def main(config_file="config.toml", preview: bool = False) -> None:
    """Main function to run festreceipt."""
    config = load_config(config_file)
    logger.info("Configuration loaded successfully.")

    if preview:
        logger.info("Generating a preview receipt.")
        generate(config, donations=[preview_donation()])
    else:
        generate(config)
