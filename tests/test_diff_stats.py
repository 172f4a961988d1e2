from prstat.core.schema.pr import GitDiffStat
from prstat.core.stats.diff import compute_diff_stats
from tests.fakes import FakeLogger

SAMPLE_DIFF = """diff --git a/src/app.py b/src/app.py
index 3b18e51..a9c2f0d 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,4 +1,5 @@
 import os
-import sys
+import sys, json
+import logging
 
 def main():
diff --git a/README.md b/README.md
index 1111111..2222222 100644
--- a/README.md
+++ b/README.md
@@ -10,2 +10,1 @@ Usage
-Old line one
-Old line two
+New line
"""


class TestComputeDiffStatsBasics:
    def test_empty_string_yields_zero_stat(self) -> None:
        assert compute_diff_stats("") == GitDiffStat(0, 0, 0)

    def test_counts_additions(self) -> None:
        assert compute_diff_stats("+a\n+b") == GitDiffStat(2, 0, 2)

    def test_counts_deletions(self) -> None:
        assert compute_diff_stats("-a\n-b") == GitDiffStat(0, 2, 2)

    def test_counts_mixed_lines(self) -> None:
        assert compute_diff_stats("+a\n-b\n+c") == GitDiffStat(2, 1, 3)

    def test_context_and_blank_lines_are_ignored(self) -> None:
        assert compute_diff_stats(" context\n\n+added\n   \n") == GitDiffStat(1, 0, 1)

    def test_handles_crlf_line_endings(self) -> None:
        assert compute_diff_stats("+a\r\n-b\r\n+c\r\n") == GitDiffStat(2, 1, 3)


class TestComputeDiffStatsMetadata:
    def test_file_headers_are_not_counted(self) -> None:
        diff = "--- a/file.txt\n+++ b/file.txt\n+real addition"

        assert compute_diff_stats(diff) == GitDiffStat(1, 0, 1)

    def test_git_headers_and_hunks_are_not_counted(self) -> None:
        diff = (
            "diff --git a/x b/x\n"
            "index 0000000..1111111 100644\n"
            "@@ -0,0 +1,2 @@\n"
        )

        assert compute_diff_stats(diff) == GitDiffStat(0, 0, 0)

    def test_realistic_multi_file_diff(self) -> None:
        assert compute_diff_stats(SAMPLE_DIFF) == GitDiffStat(3, 3, 6)

    def test_triple_markers_without_space_are_content(self) -> None:
        # "+++x" is not a file header, only "+++ " is
        assert compute_diff_stats("+++x\n---y") == GitDiffStat(1, 1, 2)


class TestComputeDiffStatsWhitespace:
    def test_leading_tab_before_deletion(self) -> None:
        assert compute_diff_stats("\t-x") == GitDiffStat(0, 1, 1)

    def test_leading_spaces_before_addition(self) -> None:
        assert compute_diff_stats("    +x") == GitDiffStat(1, 0, 1)

    def test_leading_whitespace_before_metadata(self) -> None:
        assert compute_diff_stats("  +++ b/file\n\t--- a/file") == GitDiffStat(0, 0, 0)


class TestComputeDiffStatsInvariants:
    def test_total_is_sum_of_added_and_deleted(self) -> None:
        samples = [
            "",
            "+a",
            "-a\n-b\n+c\n context",
            SAMPLE_DIFF,
            "@@ -1 +1 @@\n-old\n+new\n\\ No newline at end of file",
        ]
        for sample in samples:
            stat = compute_diff_stats(sample)
            assert stat.total_lines == stat.added_lines + stat.deleted_lines

    def test_invalid_input_degrades_to_zero_stat(self) -> None:
        logger = FakeLogger()

        result = compute_diff_stats(12345, logger)  # type: ignore[arg-type]

        assert result == GitDiffStat(0, 0, 0)
        assert logger.messages("error") == ["Error parsing diff"]

    def test_none_input_yields_zero_stat(self) -> None:
        assert compute_diff_stats(None) == GitDiffStat(0, 0, 0)  # type: ignore[arg-type]
