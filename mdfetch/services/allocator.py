"""
Divide one character budget across the contents of a batch.

Every URL first gets ``budget // n`` characters. URLs whose content was cut
short by that share (beneficiaries) then split whatever the others left
unused, in a single pass. Slack left after that pass, from integer division or
from beneficiaries shorter than their new share, stays unused.

All trimming is done on the stored full content; nothing is fetched again.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List

from mdfetch.fetch.utils import select_window

logger = logging.getLogger(__name__)

@dataclass
class AllocationRecord:
    url: str
    full_content: str
    allocated_chars: int = 0
    used_chars: int = 0
    truncated: bool = False
    final_content: str = ""

    def trim_to(self, allocation: int) -> None:
        self.allocated_chars = allocation
        # the window selector reads 0 as unbounded; a zero share means nothing
        if allocation <= 0:
            self.final_content = ""
        else:
            self.final_content = select_window(self.full_content, 0, allocation)
        self.used_chars = len(self.final_content)


def allocate(contents: Dict[str, str], total_budget: int, default_budget: int) -> Dict[str, str]:
    """
    Trim each URL's full content so the sum stays within ``total_budget``.

    Args:
        contents: url -> full (untrimmed) content, successful URLs only
        total_budget: total characters across all URLs; <= 0 uses ``default_budget``
        default_budget: configured fallback budget

    Returns:
        url -> final trimmed content
    """
    if not contents:
        return {}
    if total_budget <= 0:
        total_budget = default_budget

    records = [AllocationRecord(url=url, full_content=text) for url, text in contents.items()]
    initial_allocation = total_budget // len(records)
    logger.debug(
        "initial allocation num_successful=%d total_budget=%d per_url=%d",
        len(records), total_budget, initial_allocation,
    )

    beneficiaries: List[AllocationRecord] = []
    for record in records:
        record.trim_to(initial_allocation)
        if len(record.full_content) > initial_allocation:
            record.truncated = True
            beneficiaries.append(record)
            logger.debug(
                "beneficiary url=%s full_length=%d allocated=%d",
                record.url, len(record.full_content), initial_allocation,
            )

    total_used = sum(r.used_chars for r in records)
    remaining = total_budget - total_used
    logger.debug(
        "reallocation status total_used=%d remaining=%d beneficiaries=%d",
        total_used, remaining, len(beneficiaries),
    )

    if remaining > 0 and beneficiaries:
        bonus = remaining // len(beneficiaries)
        for record in beneficiaries:
            previous = record.used_chars
            record.trim_to(initial_allocation + bonus)
            logger.debug(
                "reallocated url=%s previous_length=%d new_length=%d target=%d",
                record.url, previous, record.used_chars, record.allocated_chars,
            )

    return {r.url: r.final_content for r in records}
