"""Sample confirmation emails for demos and an unconnected mailbox."""

from typing import List, Optional

from career_inbox.core.models import EmailRecord, ImportBatch
from career_inbox.parsing.pipeline import ApplicationEmailParser

SAMPLE_SOURCE = "sample"


def generate_sample_emails() -> List[EmailRecord]:
    """Six confirmation emails across platforms, including one cross-posted duplicate."""
    return [
        EmailRecord(
            message_id="sample-linkedin-001",
            sender="jobs-noreply@linkedin.com",
            subject="Your application was sent to Google",
            body=(
                "Hi there,\n\n"
                "Your application was sent to Google for the Senior Software Engineer position.\n\n"
                "Job Title: Senior Software Engineer\n"
                "Company: Google\n"
                "Location: Mountain View, CA\n\n"
                "Good luck with your application!\n\n"
                "Best,\n"
                "The LinkedIn Team"
            ),
            received_date="2025-12-10T10:30:00Z",
        ),
        EmailRecord(
            message_id="sample-indeed-001",
            sender="noreply@indeed.com",
            subject="Application Received - Full Stack Developer at Microsoft",
            body=(
                "Thank you for applying on Indeed!\n\n"
                "You applied for Full Stack Developer at Microsoft.\n\n"
                "Job Title: Full Stack Developer\n"
                "Company: Microsoft\n"
                "Location: Redmond, WA\n\n"
                "We've forwarded your resume to the employer.\n\n"
                "- Indeed Team"
            ),
            received_date="2025-12-12T14:15:00Z",
        ),
        EmailRecord(
            message_id="sample-glassdoor-001",
            sender="applications@glassdoor.com",
            subject="Application submitted via Glassdoor",
            body=(
                "Your application has been submitted through Glassdoor.\n\n"
                "Position: Frontend Engineer\n"
                "Company: Meta\n"
                "Location: Menlo Park, CA\n\n"
                "Track your application status on Glassdoor.\n\n"
                "Glassdoor Team"
            ),
            received_date="2025-12-14T09:45:00Z",
        ),
        EmailRecord(
            message_id="sample-linkedin-002",
            sender="jobs-noreply@linkedin.com",
            subject="Application sent - Backend Developer at Amazon",
            body=(
                "Your application to Amazon has been submitted!\n\n"
                "You applied to Backend Developer at Amazon.\n"
                "Location: Seattle, WA\n\n"
                "Good luck!\n"
                "LinkedIn"
            ),
            received_date="2025-12-15T16:20:00Z",
        ),
        EmailRecord(
            message_id="sample-indeed-002",
            sender="noreply@indeedemail.com",
            subject="Indeed Application: DevOps Engineer - Netflix",
            body=(
                "Application Received\n\n"
                "You applied for DevOps Engineer at Netflix\n"
                "Location: Los Gatos, CA\n\n"
                "Your application has been sent to the employer."
            ),
            received_date="2025-12-16T11:00:00Z",
        ),
        # Same job as sample-indeed-001, applied through another board
        EmailRecord(
            message_id="sample-glassdoor-002",
            sender="mail@glassdoor.com",
            subject="Glassdoor Application Confirmation",
            body=(
                "Application Submitted!\n\n"
                "Role: Full Stack Developer\n"
                "Company: Microsoft\n"
                "Location: Redmond, WA\n\n"
                "Your application via Glassdoor is complete."
            ),
            received_date="2025-12-13T10:00:00Z",
        ),
    ]


def import_sample_applications(parser: Optional[ApplicationEmailParser] = None) -> ImportBatch:
    """Run the sample emails through the batch importer."""
    parser = parser or ApplicationEmailParser()
    batch = parser.process_batch(generate_sample_emails(), source=SAMPLE_SOURCE)
    batch.message = "Connect your mailbox to import real job applications. Showing sample applications."
    return batch
