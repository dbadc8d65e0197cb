"""
CLI — точка входа `lotto`

Один линейный путь:
1. validate_options(argv) → OptionsResult
2. --scrape: URL → CSV в stdout
3. иначе: CSV файл → Engine → отчёт (text/json) в stdout

Ошибки ядра, чтения файла и скрейпера логируются и дают код выхода 1.
"""

import logging
import sys
from typing import Optional, Sequence, TextIO

from jsonschema import ValidationError as ContractValidationError

from src.cli.formatter import format_json_report, format_report
from src.cli.log import setup_logging
from src.cli.options import GeneratorOptions, OutputFormat, build_parser, validate_options
from src.cli.reader import ReaderError, read_frequency_rows
from src.core.errors import LottoError
from src.engine import LottoEngine
from src.scraper import ScrapeError, dump_csv, scrape_frequencies_from

logger = logging.getLogger("lotto.cli")

EXIT_OK = 0
EXIT_ERROR = 1


def run_scrape(options: GeneratorOptions, out: TextIO) -> None:
    pairs = scrape_frequencies_from(options.source)
    dump_csv(pairs, out)


def run_generate(options: GeneratorOptions, out: TextIO) -> None:
    rows = read_frequency_rows(options.source)
    logger.debug(f"Read {len(rows)} rows from '{options.source}'")

    engine = LottoEngine(duplicate_policy=options.duplicate_policy, max_games=options.max_games)
    result = engine.generate(rows, options.pool_size, options.select_size, options.direction)

    if result.pool_truncated:
        logger.warning(
            f"Table has only {result.table_size} numbers, pool reduced from "
            f"{result.pool_size} to {len(result.pool)}"
        )

    if options.output_format == OutputFormat.JSON:
        print(format_json_report(result, options.source), file=out)
    else:
        print(format_report(result, options.source, options.pad_width), file=out)


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    setup_logging()

    validation = validate_options(sys.argv[1:] if argv is None else argv)
    if not validation.ok:
        if validation.error:
            logger.error(validation.error)
        if validation.show_help:
            print(build_parser().format_help(), file=out)
        return EXIT_ERROR if validation.error else EXIT_OK

    options = validation.options
    if options.verbose:
        setup_logging(logging.DEBUG)

    try:
        if options.scrape:
            run_scrape(options, out)
        else:
            run_generate(options, out)
    except (LottoError, ReaderError, ScrapeError, ContractValidationError) as e:
        logger.error(str(e))
        return EXIT_ERROR
    except OSError as e:
        logger.error(f"cannot read '{options.source}': {e.strerror or e}")
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
