"""Calculate every expression of a text file and write the results to disk."""
from pathlib import Path
from typing import List, TextIO

from pydantic import BaseModel, ConfigDict, Field, FilePath

from func_calc.common.calculator import evaluate_request
from func_calc.common.logger import logger
from func_calc.common.operations import CalculationRequest, CalculationResult


def build_output_path(input_path: Path) -> Path:
    """
    Name the results file written beside an expressions file.

    The input suffixes are folded into the name so that "expressions.txt" and
    "expressions.csv" in the same folder get distinct results files.

    :param Path input_path: Path to the expressions file

    :return: Path of the results file, e.g. expressions.txt -> expressions_txt_results.txt
    :rtype: Path
    """
    suffix_safe = "_".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{input_path.stem}{suffix_safe}_results.txt")


class BatchCalculator(BaseModel):
    """
    Calculate a file holding one expression per line.

    Features:
        - Blank lines are skipped, other lines are stripped.
        - A malformed line is reported in the output and does not stop the batch.
        - Each result is written to disk as soon as it is computed.
    """

    # Make the Pydantic instance immutable (read-only), the files must not change during a run
    model_config = ConfigDict(frozen=True)

    input_file: FilePath = Field(..., description="Text file with one expression per line")
    output_file: Path = Field(..., description="Path to write calculation results")

    def _read_expressions(self) -> List[str]:
        """
        Read the input file and return its non-empty lines.

        :return: List of stripped expression lines
        :rtype: List[str]
        """
        lines: List[str] = self.input_file.read_text(encoding="utf-8").splitlines()
        return [line.strip() for line in lines if line.strip()]

    @staticmethod
    def _write_result(result: CalculationResult, f_out: TextIO) -> None:
        """
        Write one result line and flush it.

        :param CalculationResult result: Outcome of one expression
        :param TextIO f_out: Open file handle for writing results
        """
        if result.ok:
            f_out.write(f"{result.expression} = {result.result}\n")
        else:
            f_out.write(f"{result.expression} -> ERROR: {result.error}\n")
        # Flushing keeps finished lines on disk if the run is interrupted
        f_out.flush()

    def run(self) -> List[CalculationResult]:
        """
        Calculate every expression of the input file.

        :return: Results in input order
        :rtype: List[CalculationResult]
        """
        logger.info(f"📄🏁 Calculating {self.input_file} into {self.output_file}")
        results: List[CalculationResult] = []

        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, expression in enumerate(self._read_expressions(), start=1):
                result = evaluate_request(CalculationRequest(expression=expression))
                if result.ok:
                    logger.info(f"🧮✅ Line {line_number}: {expression} = {result.result}")
                else:
                    logger.error(
                        f"🧮❌ Line {line_number} failed: {result.error}\n"
                        f"Invalid expression, could not calculate: {expression!r}"
                    )
                self._write_result(result, f_out)
                results.append(result)

        failed = sum(1 for result in results if not result.ok)
        logger.info(f"📄✅ {len(results)} expressions calculated, {failed} failed")
        return results
