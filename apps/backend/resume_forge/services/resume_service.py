# File: apps/backend/resume_forge/services/resume_service.py

import os
import json
import tempfile
import logging

from markitdown import MarkItDown
from typing import Any, Dict, Optional, Tuple

from resume_forge.agent import AgentManager, ProviderError, StrategyError
from resume_forge.core import settings
from resume_forge.prompt import prompt_factory
from resume_forge.profile import fill_contact_from_master, merge_into_master, migrate_resume_data
from resume_forge.schemas.json import json_schema_factory
from resume_forge.schemas.pydantic import ResumeRecord
from .exceptions import ResumeParsingError, ResumeValidationError
from .master_profile_service import MasterProfileService

logger = logging.getLogger(__name__)

PDF_TYPE = "application/pdf"
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_TYPE = "text/plain"
ALLOWED_CONTENT_TYPES = (PDF_TYPE, DOCX_TYPE, TEXT_TYPE)


class ResumeService:
    def __init__(self, agent_manager: Optional[AgentManager] = None):
        self.md = MarkItDown(enable_plugins=False)
        self.json_agent_manager = agent_manager or AgentManager(strategy="json")

    async def parse_file(
        self, file_bytes: bytes, file_type: str, filename: str
    ) -> Tuple[str, ResumeRecord]:
        """
        Converts a resume file (PDF/DOCX/TXT) to text and structures it with the LLM.

        Args:
            file_bytes: Raw bytes of the uploaded file
            file_type: MIME type of the file
            filename: Original filename

        Returns:
            A tuple of the extracted text and the normalised resume record.

        Raises:
            ResumeValidationError: If the file is unsupported or has no text.
            ResumeParsingError: If the model output cannot be used.
        """
        text_content = self.extract_text(file_bytes, file_type, filename)
        logger.info(f"Attempting structured data extraction for file: {filename}")
        record = await self.parse_text(text_content)
        logger.info(f"Successfully extracted structured data for file: {filename}")
        return text_content, record

    def extract_text(self, file_bytes: bytes, file_type: str, filename: str) -> str:
        if file_type not in ALLOWED_CONTENT_TYPES:
            raise ResumeValidationError(message=f"Unsupported file type: {file_type}")

        if file_type == TEXT_TYPE:
            text_content = file_bytes.decode("utf-8", errors="replace")
        else:
            text_content = self._convert_with_markitdown(file_bytes, file_type, filename)

        if not text_content or not text_content.strip():
            logger.warning(f"Conversion resulted in empty text content for file: {filename}")
            raise ResumeValidationError(message="Resume file appears to be empty or could not be read.")
        logger.info(f"Successfully converted file to text content (length: {len(text_content)})")
        return text_content

    def _convert_with_markitdown(self, file_bytes: bytes, file_type: str, filename: str) -> str:
        temp_path = None
        with tempfile.NamedTemporaryFile(
            delete=False, suffix=self._get_file_extension(file_type)
        ) as temp_file:
            temp_file.write(file_bytes)
            temp_path = temp_file.name

        try:
            logger.info(f"Converting file: {filename} ({file_type})")
            result = self.md.convert(temp_path)
            return result.text_content or ""
        except Exception as e:
            logger.error(f"MarkItDown conversion failed for {filename}: {e}", exc_info=True)
            raise ResumeValidationError(message=f"File conversion failed: {e}") from e
        finally:
            # Ensure temporary file is always cleaned up
            if temp_path and os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                    logger.debug(f"Removed temporary file: {temp_path}")
                except OSError as e:
                    logger.error(f"Error removing temporary file {temp_path}: {e}")

    def _get_file_extension(self, file_type: str) -> str:
        """Returns the appropriate file extension based on MIME type"""
        if file_type == PDF_TYPE:
            return ".pdf"
        elif file_type == DOCX_TYPE:
            return ".docx"
        return ""

    async def parse_text(self, resume_text: str) -> ResumeRecord:
        if not resume_text or not resume_text.strip():
            logger.warning("Cannot extract structured JSON from empty resume text.")
            raise ResumeValidationError(message="Cannot parse structure from empty resume content.")

        if len(resume_text) > settings.MAX_PARSE_INPUT_CHARS:
            logger.info(
                f"Truncating resume text from {len(resume_text)} to {settings.MAX_PARSE_INPUT_CHARS} chars"
            )
            resume_text = resume_text[: settings.MAX_PARSE_INPUT_CHARS]

        system_prompt = prompt_factory.get("structured_resume").format(
            schema=json.dumps(json_schema_factory.get("structured_resume"), indent=2)
        )
        logger.debug("Sending prompt for structured resume extraction.")

        try:
            parsed: Any = await self.json_agent_manager.run(
                prompt=f"Parse this resume text:\n\n{resume_text}",
                system_prompt=system_prompt,
            )
        except (ProviderError, StrategyError) as agent_error:
            logger.error(f"AgentManager failed during structured JSON extraction: {agent_error}", exc_info=True)
            raise ResumeParsingError(message=f"AI agent failed to process the resume content: {agent_error}")

        if not isinstance(parsed, dict):
            raise ResumeParsingError(message="Unexpected output format from AI agent.")

        # The normaliser never fails: malformed sections come back empty
        return migrate_resume_data(parsed)

    def load_parsed(
        self,
        parsed: ResumeRecord,
        master_service: MasterProfileService,
        current_resume: Optional[Dict[str, Any]] = None,
        save_to_master: bool = True,
    ) -> Tuple[ResumeRecord, bool]:
        """
        Turn a fresh parse into the new working resume.

        With a working resume already loaded the parse is merged into it (so no
        experience is lost); otherwise empty contact fields are backfilled from
        the master profile. The result is then folded into the master profile.

        Returns the working resume and whether a merge into `current_resume` happened.
        """
        if current_resume is not None:
            working = merge_into_master(migrate_resume_data(current_resume), parsed)
            merged = True
        else:
            working = fill_contact_from_master(parsed, master_service.get_master())
            merged = False

        if save_to_master:
            master_service.merge(working)
        return working, merged
