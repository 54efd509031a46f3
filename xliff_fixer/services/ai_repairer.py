import re
from openai import AsyncOpenAI
from xliff_fixer.models.repair_result import RepairResult
from xliff_fixer.services.xml_validator import validate_xml
from xliff_fixer.settings import settings
from xliff_fixer.logconf import logger


class AIRepairError(RuntimeError):
    """No credential, or the model could not be reached."""


class AIRepairer:
    """Isolated service ─ the client can be mocked in tests."""

    _system_instruction = """You are an expert in XML and XLIFF localization file formats.
Your task is to repair a corrupted XLIFF file.

RULES:
1. Return ONLY the valid, repaired XML content. Do not include markdown code blocks (e.g., ```xml).
2. Fix encoding issues, unescaped entities (like &), and close any missing tags.
3. Do not translate or change the translatable content text, only fix the structure.
4. If the file is truncated, attempt to close the necessary tags to make it well-formed."""

    _user_tmpl = "Here is the broken XLIFF content:\n\n{content}"

    def __init__(self, client: AsyncOpenAI | None = None) -> None:
        self._client = client or (
            AsyncOpenAI(api_key=settings.openai_api_key)
            if settings.openai_api_key else None
        )

    @staticmethod
    def _strip_fences(txt: str) -> str:
        # the model sometimes wraps its answer despite the instructions
        txt = re.sub(r"^```xml\n", "", txt)
        txt = re.sub(r"^```\n", "", txt)
        return re.sub(r"\n```$", "", txt)

    async def repair(self, raw_text: str) -> RepairResult:
        if not self._client:
            raise AIRepairError("API key not found. Set OPENAI_API_KEY.")

        logger.info("Initializing AI repair (%s)...", settings.ai_model)
        try:
            resp = await self._client.chat.completions.create(
                model=settings.ai_model,
                messages=[
                    {"role": "system", "content": self._system_instruction},
                    {"role": "user", "content": self._user_tmpl.format(content=raw_text)},
                ],
                temperature=settings.ai_temperature,
                timeout=settings.ai_timeout_seconds,
            )
            txt = resp.choices[0].message.content or ""
        except Exception as e:
            logger.error("AI repair error: %s", e, exc_info=True)
            raise AIRepairError(str(e) or "Failed to repair with AI") from e

        fixed = self._strip_fences(txt)
        outcome = validate_xml(fixed)
        # generated text is always treated as new content
        return RepairResult.from_validation(fixed, outcome, was_modified=True)


async def repair_with_ai(raw_text: str) -> RepairResult:
    return await AIRepairer().repair(raw_text)
