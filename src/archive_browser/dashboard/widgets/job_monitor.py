"""
Job progress panel shown while a file list request is pending.

The panel renders whatever job queues it is handed; polling belongs to
window/jobs.py.
"""

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QProgressBar,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtCore import Qt

from ...core.models import JobQueue, JobStatus
from ..styles import COLORS, FONTS, JOB_STATUS_COLORS, RADIUS, SPACING, format_progress

WAITING_TEXT = "Waiting for the backup server..."


@dataclass(frozen=True)
class JobRow:
    title: str
    status: str
    progress: str
    percent: Optional[int]
    status_key: str = JobStatus.QUEUED.value


def summarize_jobs(queues: list[JobQueue]) -> list[JobRow]:
    """Display rows for every job in ``queues``, feed order kept."""
    rows = []
    for queue in queues:
        for job in queue.jobs:
            progress_text = ""
            percent = None
            if job.progress is not None:
                percent = job.progress.percent
                progress_text = format_progress(
                    job.progress.current, job.progress.total, percent
                )
                if job.progress.message:
                    progress_text = (
                        f"{job.progress.message} {progress_text}".strip()
                    )
            title = job.title or job.description or f"Job {job.unique_job_number}"
            rows.append(
                JobRow(
                    title=title,
                    status=job.status.value.capitalize(),
                    progress=progress_text,
                    percent=percent,
                    status_key=job.status.value,
                )
            )
    return rows


class JobRowWidget(QFrame):
    """One job: title, status badge and progress bar."""

    def __init__(self, row: JobRow, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("job-row")
        self.setStyleSheet(f"""
            QFrame#job-row {{
                background-color: {COLORS["bg_elevated"]};
                border: 1px solid {COLORS["border_subtle"]};
                border-radius: {RADIUS["md"]}px;
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["md"], SPACING["sm"], SPACING["md"], SPACING["sm"]
        )
        layout.setSpacing(SPACING["xs"])

        self.title_label = QLabel(row.title)
        self.title_label.setStyleSheet(f"""
            font-weight: {FONTS["weight_medium"]};
            color: {COLORS["text_primary"]};
        """)
        layout.addWidget(self.title_label)

        fg, bg = JOB_STATUS_COLORS.get(row.status_key, JOB_STATUS_COLORS["QUEUED"])
        self.status_label = QLabel(row.status)
        self.status_label.setStyleSheet(f"""
            color: {fg};
            background-color: {bg};
            border-radius: {RADIUS["sm"]}px;
            padding: 2px {SPACING["sm"]}px;
            font-size: {FONTS["size_xs"]}px;
        """)
        layout.addWidget(self.status_label, 0, Qt.AlignmentFlag.AlignLeft)

        self.progress_bar = QProgressBar()
        self.progress_bar.setTextVisible(False)
        if row.percent is None:
            # Busy indicator
            self.progress_bar.setRange(0, 0)
        else:
            self.progress_bar.setRange(0, 100)
            self.progress_bar.setValue(row.percent)
        layout.addWidget(self.progress_bar)

        self.progress_label = QLabel(row.progress)
        self.progress_label.setStyleSheet(f"""
            font-size: {FONTS["size_sm"]}px;
            color: {COLORS["text_muted"]};
        """)
        self.progress_label.setVisible(bool(row.progress))
        layout.addWidget(self.progress_label)


class JobProgressPanel(QWidget):
    """Renders the last job feed it was given."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._rows: list[JobRow] = []

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, SPACING["lg"], 0, 0)
        self._layout.setSpacing(SPACING["sm"])
        self._layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self._waiting = QLabel(WAITING_TEXT)
        self._waiting.setStyleSheet(f"""
            font-size: {FONTS["size_md"]}px;
            color: {COLORS["text_secondary"]};
        """)
        self._layout.addWidget(self._waiting)

        self._spinner = QProgressBar()
        self._spinner.setRange(0, 0)
        self._spinner.setTextVisible(False)
        self._layout.addWidget(self._spinner)

        self._job_widgets: list[JobRowWidget] = []

    @property
    def rows(self) -> list[JobRow]:
        return list(self._rows)

    @property
    def job_widgets(self) -> list[JobRowWidget]:
        return list(self._job_widgets)

    def set_queues(self, queues: list[JobQueue]) -> None:
        self._rows = summarize_jobs(queues)
        for widget in self._job_widgets:
            self._layout.removeWidget(widget)
            widget.deleteLater()
        self._job_widgets = []

        for row in self._rows:
            widget = JobRowWidget(row)
            self._job_widgets.append(widget)
            self._layout.addWidget(widget)
        # Generic busy bar only until the feed reports a job
        self._spinner.setVisible(not self._rows)

    def clear(self) -> None:
        self.set_queues([])
