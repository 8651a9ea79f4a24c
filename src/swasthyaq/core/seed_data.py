"""Built-in records used to populate an empty store.

Each function builds brand new records on every call so no caller can leak
changes into another caller's seed.
"""

import time

from swasthyaq.core.models import (
    Attachment,
    AuditLog,
    ChatBoard,
    ChatMessage,
    House,
    Question,
    QuestionStatus,
    User,
)

_DAY_MS = 86_400_000
_HOUR_MS = 3_600_000


def now_ms() -> int:
    """Current time in epoch millis."""
    return int(time.time() * 1000)


def seed_users() -> tuple[User, ...]:
    return (
        User(id="u1", name="Admin User"),
        User(id="u2", name="Ministry Staff"),
    )


def seed_chat_boards(now: int | None = None) -> tuple[ChatBoard, ...]:
    ts = now if now is not None else now_ms()
    return (
        ChatBoard(
            id="c1",
            title="General",
            messages=[ChatMessage(id="m1", chat_id="c1", user_id="u1", text="Hello", ts=ts)],
        ),
    )


def seed_questions(now: int | None = None) -> tuple[Question, ...]:
    ts = now if now is not None else now_ms()
    return (
        Question(
            id="q1",
            ticket_number="LS-2024-0117",
            member_name="Smt. Anita Rao",
            house=House.LOK_SABHA,
            title="Inquiry on Vaccine Distribution Logistics in Rural Areas",
            body=(
                "This question pertains to the current state of vaccine distribution "
                "logistics. We need a detailed report on the challenges faced and measures "
                "being taken to ensure timely delivery to remote and rural locations across "
                "the country. Please include data on cold chain maintenance and last-mile "
                "delivery success rates."
            ),
            division="Logistics",
            status=QuestionStatus.ANSWERED,
            attachment_ids=["a1"],
            tags=["vaccines", "logistics"],
            created_at=ts - _DAY_MS * 5,
            created_by="u2",
            updated_at=ts - _DAY_MS * 2,
        ),
        Question(
            id="q2",
            ticket_number="RS-2024-0342",
            member_name="Shri Vikram Singh",
            house=House.RAJYA_SABHA,
            title="Status of Clinical Trials for New Antiviral Drug (AV-2024)",
            body=(
                "Requesting an update on the phase III clinical trials for the new antiviral "
                "drug AV-2024. What are the preliminary findings regarding efficacy and "
                "safety? When is the expected timeline for regulatory submission?"
            ),
            division="Clinical Services",
            status=QuestionStatus.SUBMITTED,
            attachment_ids=["a2", "a3"],
            tags=["clinical-trials"],
            created_at=ts - _DAY_MS * 2,
            created_by="u2",
            updated_at=ts - _DAY_MS * 2,
        ),
        Question(
            id="q3",
            ticket_number="LS-2024-0451",
            member_name="Dr. Meera Pillai",
            house=House.LOK_SABHA,
            title="Review of Public Health Awareness Campaigns for Dengue Prevention",
            body=(
                "An assessment is required for the effectiveness of recent public health "
                "awareness campaigns on dengue prevention. Please provide metrics on public "
                "engagement, and any observed correlation with a reduction in reported cases "
                "in campaign areas."
            ),
            division="Public Health",
            status=QuestionStatus.DRAFT,
            attachment_ids=[],
            tags=["dengue", "awareness"],
            created_at=ts - _HOUR_MS,
            created_by="u1",
            updated_at=ts - _HOUR_MS,
        ),
    )


def seed_attachments(now: int | None = None) -> tuple[Attachment, ...]:
    ts = now if now is not None else now_ms()
    return (
        Attachment(
            id="a1",
            question_id="q1",
            label="Distribution Report Q2 2024.pdf",
            folder_path="https://example.com/shared-drive/logistics/q2-report",
            division="Logistics",
            created_at=ts - _DAY_MS * 4,
        ),
        Attachment(
            id="a2",
            question_id="q2",
            label="Preliminary Trial Data (Internal).xlsx",
            folder_path="https://example.com/shared-drive/clinical/av-2024-prelim",
            division="Clinical Services",
            created_at=ts - _DAY_MS,
        ),
        Attachment(
            id="a3",
            question_id="q2",
            label="Ethics Committee Approval.pdf",
            folder_path="https://example.com/shared-drive/clinical/av-2024-ethics",
            division="Clinical Services",
            created_at=ts - _DAY_MS,
        ),
    )


def seed_audit_logs(now: int | None = None) -> tuple[AuditLog, ...]:
    """Static activity history; nothing appends to it at runtime."""
    ts = now if now is not None else now_ms()
    return (
        AuditLog(
            id="log1",
            action="Question Created",
            entity="question",
            entity_id="q1",
            timestamp=ts - _DAY_MS * 5,
            user="Ministry Staff",
        ),
        AuditLog(
            id="log2",
            action="Attachment Added",
            entity="attachment",
            entity_id="a1",
            timestamp=ts - _DAY_MS * 4,
            user="Ministry Staff",
        ),
        AuditLog(
            id="log3",
            action="Status Changed to Answered",
            entity="question",
            entity_id="q1",
            timestamp=ts - _DAY_MS * 2,
            user="Admin User",
        ),
        AuditLog(
            id="log4",
            action="Question Created",
            entity="question",
            entity_id="q2",
            timestamp=ts - _DAY_MS * 2,
            user="Ministry Staff",
        ),
        AuditLog(
            id="log5",
            action="Question Created",
            entity="question",
            entity_id="q3",
            timestamp=ts - _HOUR_MS,
            user="Admin User",
        ),
    )
