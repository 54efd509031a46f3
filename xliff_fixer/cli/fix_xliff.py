import asyncio, argparse, sys
from pathlib import Path
from xliff_fixer.services.xliff_fixer import XliffFixer
from xliff_fixer.services.ai_repairer import AIRepairError
from xliff_fixer.utils.file_utils import FileRejectedError
from xliff_fixer.logconf import logger

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Repair a corrupted XLIFF/XML localization file."
    )
    parser.add_argument("-i", "--input", required=True, help="File to repair (.xlf, .xliff, .xml)")
    parser.add_argument("-o", "--output", help="Where to write the result (default: fixed_<name> beside the input)")
    parser.add_argument("--ai", action="store_true", help="Repair with the OpenAI model instead of the heuristics")
    args = parser.parse_args(argv)

    fixer = XliffFixer()
    try:
        result, _ = asyncio.run(
            fixer.repair_file(Path(args.input), args.output and Path(args.output), use_ai=args.ai)
        )
    except (FileRejectedError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 2
    except AIRepairError:
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    return 0 if result.is_valid else 1

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
