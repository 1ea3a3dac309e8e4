"""
Behave environment configuration for cfzone scenarios.
"""

import io
import logging
import shutil
import tempfile
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.test_data_dir = Path(tempfile.mkdtemp())
    context.zone = "example.com"
    context.zone_file = context.test_data_dir / "example.com.zone"
    context.zone_lines = []
    context.seed_records = []
    context.answers = []
    context.prompts = []
    context.output = io.StringIO()
    context.error = None
    context.run_aborted = False

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    shutil.rmtree(context.test_data_dir, ignore_errors=True)
    logger.info(f"Completed scenario: {scenario.name}")
