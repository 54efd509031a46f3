"""
Orchestrates the repairers, the validation report and file IO.
"""

from __future__ import annotations

from pathlib import Path
from xliff_fixer.logconf import logger
from xliff_fixer.models.file_data import FileData
from xliff_fixer.models.repair_result import RepairResult
from xliff_fixer.services.heuristic_repairer import HeuristicRepairer
from xliff_fixer.services.ai_repairer import AIRepairer, AIRepairError
from xliff_fixer.utils.file_utils import fixed_file_name, read_file, write_fixed

class XliffFixer:
    def __init__(
        self,
        heuristic: HeuristicRepairer | None = None,
        ai: AIRepairer | None = None,
    ) -> None:
        self.heuristic = heuristic or HeuristicRepairer()
        self._ai = ai

    @property
    def ai(self) -> AIRepairer:
        # built lazily so heuristic-only runs never touch the OpenAI client
        if self._ai is None:
            self._ai = AIRepairer()
        return self._ai

    def run_heuristic(self, file: FileData) -> RepairResult:
        logger.info("Starting heuristic repair of %s...", file.name)
        result = self.heuristic.repair(file.content)

        if result.was_modified:
            logger.info("Modifications applied to file structure.")
        else:
            logger.warning(
                "No heuristic patterns matched. File might be intact or have complex issues."
            )

        if result.is_valid:
            logger.info("XML Validation Passed.")
        else:
            logger.error("XML Validation Failed: %s", result.errors[0])
        return result

    async def run_ai(self, file: FileData) -> RepairResult:
        try:
            result = await self.ai.repair(file.content)
        except AIRepairError as e:
            logger.error("AI Repair Failed: %s", e)
            logger.info("Tip: Ensure OPENAI_API_KEY holds a valid API key.")
            raise
        logger.info("AI Reconstruction complete.")

        if result.is_valid:
            logger.info("AI Output Validated Successfully.")
        else:
            logger.warning("AI Output Validation Warning: %s", result.errors[0])
        return result

    async def repair(self, file: FileData, use_ai: bool = False) -> RepairResult:
        if use_ai:
            return await self.run_ai(file)
        return self.run_heuristic(file)

    async def repair_file(
        self,
        input_path: str | Path,
        output_path: str | Path | None = None,
        use_ai: bool = False,
    ) -> tuple[RepairResult, Path]:
        input_path = Path(input_path)
        file = read_file(input_path)
        result = await self.repair(file, use_ai=use_ai)

        out = Path(output_path) if output_path else input_path.with_name(fixed_file_name(file.name))
        out.parent.mkdir(parents=True, exist_ok=True)
        await write_fixed(result.fixed_content, out)
        logger.info("Saved %s (%s → %s)", out.name, input_path, out)
        return result, out
