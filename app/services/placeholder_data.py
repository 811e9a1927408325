"""
Built-in placeholder records.

Served when a store query fails so list views stay populated.
Every function returns fresh objects; callers may not share them.
"""

from datetime import date, datetime, timezone
from typing import List

from app.schemas.schemas import (
    Application, ApplicationStatus, Internship, Notification,
    NotificationType, SavedInternship
)

_CREATED = datetime(2024, 3, 1, tzinfo=timezone.utc)


_INTERNSHIPS = [
    {
        "id": "1",
        "title": "Software Development Intern",
        "company": "TechCorp Solutions",
        "location": "Bangalore, Karnataka",
        "state": "Karnataka",
        "duration": "3 months",
        "stipend": "₹15,000/month",
        "skills": ["JavaScript", "React", "Python", "Git"],
        "type": "Technical",
        "category": "Information Technology",
        "remote": True,
        "description": "Join our development team and work on real-world projects using modern "
                       "technologies. Perfect for beginners with basic programming knowledge.",
        "requirements": ["Basic programming knowledge", "Willingness to learn", "Good communication skills"],
        "benefits": ["Mentorship program", "Flexible working hours", "Certificate of completion"],
        "application_deadline": date(2024, 3, 15),
        "start_date": date(2024, 4, 1),
        "language_requirement": ["English", "Hindi"],
    },
    {
        "id": "2",
        "title": "Digital Marketing Assistant",
        "company": "Creative Agency Pvt Ltd",
        "location": "Mumbai, Maharashtra",
        "state": "Maharashtra",
        "duration": "4 months",
        "stipend": "₹12,000/month",
        "skills": ["Social Media Marketing", "Content Writing", "Google Analytics", "Canva"],
        "type": "Marketing",
        "category": "Marketing & Sales",
        "remote": False,
        "description": "Learn digital marketing strategies and help manage social media campaigns for clients.",
        "requirements": ["Creative thinking", "Basic computer skills", "English proficiency"],
        "benefits": ["Industry exposure", "Skill development workshops", "Portfolio building"],
        "application_deadline": date(2024, 3, 20),
        "start_date": date(2024, 4, 5),
        "language_requirement": ["English", "Hindi", "Marathi"],
    },
    {
        "id": "3",
        "title": "Data Analysis Trainee",
        "company": "DataViz Corp",
        "location": "Delhi NCR",
        "state": "Delhi",
        "duration": "6 months",
        "stipend": "₹18,000/month",
        "skills": ["Excel", "Statistics", "SQL", "Power BI"],
        "type": "Analytics",
        "category": "Data Science",
        "remote": True,
        "description": "Work with data teams to analyze business metrics and create insightful reports.",
        "requirements": ["Analytical mindset", "Excel proficiency", "Attention to detail"],
        "benefits": ["Data certification", "Remote work opportunity", "Career guidance"],
        "application_deadline": date(2024, 3, 25),
        "start_date": date(2024, 4, 10),
        "language_requirement": ["English", "Hindi"],
    },
    {
        "id": "4",
        "title": "Content Writing Intern",
        "company": "MediaHub Communications",
        "location": "Chennai, Tamil Nadu",
        "state": "Tamil Nadu",
        "duration": "3 months",
        "stipend": "₹10,000/month",
        "skills": ["Content Writing", "SEO", "WordPress", "Research"],
        "type": "Content",
        "category": "Media & Communications",
        "remote": True,
        "description": "Create engaging content for websites, blogs, and social media.",
        "requirements": ["Excellent writing skills", "Creativity", "Research abilities"],
        "benefits": ["Portfolio development", "Byline opportunities", "SEO training"],
        "application_deadline": date(2024, 3, 18),
        "start_date": date(2024, 4, 2),
        "language_requirement": ["English", "Tamil"],
    },
    {
        "id": "5",
        "title": "Finance & Accounting Assistant",
        "company": "FinanceFirst Services",
        "location": "Pune, Maharashtra",
        "state": "Maharashtra",
        "duration": "4 months",
        "stipend": "₹14,000/month",
        "skills": ["Accounting", "Excel", "Tally", "Financial Analysis"],
        "type": "Finance",
        "category": "Finance & Banking",
        "remote": False,
        "description": "Support financial operations and learn accounting principles.",
        "requirements": ["Commerce background preferred", "Numerical aptitude", "Attention to detail"],
        "benefits": ["Professional certification", "Industry mentorship", "Job placement support"],
        "application_deadline": date(2024, 3, 22),
        "start_date": date(2024, 4, 8),
        "language_requirement": ["English", "Hindi", "Marathi"],
    },
    {
        "id": "6",
        "title": "Machine Learning Intern",
        "company": "NeuroTech Labs",
        "location": "Bengaluru",
        "state": "Karnataka",
        "duration": "3 months",
        "stipend": "₹15,000/month",
        "skills": ["Python", "TensorFlow", "scikit-learn", "Data Preprocessing"],
        "type": "AI/ML",
        "category": "Artificial Intelligence",
        "remote": False,
        "description": "Assist in building predictive models and training machine learning pipelines.",
        "requirements": ["Strong Python skills", "Basic ML concepts", "Problem-solving ability"],
        "benefits": ["Hands-on ML projects", "Mentorship from experts"],
        "application_deadline": date(2024, 4, 15),
        "start_date": date(2024, 5, 1),
        "suitable_for_first_timers": False,
        "language_requirement": ["English"],
    },
    {
        "id": "7",
        "title": "Frontend Development Intern",
        "company": "PixelWave Solutions",
        "location": "Hyderabad",
        "state": "Telangana",
        "duration": "4 months",
        "stipend": "₹12,000/month",
        "skills": ["React.js", "HTML", "CSS", "JavaScript"],
        "type": "Development",
        "category": "Web Development",
        "remote": True,
        "description": "Work on user-facing applications, improve UI/UX, and optimize web performance.",
        "requirements": ["Knowledge of React.js", "Responsive design", "Basic Git/GitHub"],
        "benefits": ["Remote work", "Project certificate", "Exposure to real clients"],
        "application_deadline": date(2024, 4, 5),
        "start_date": date(2024, 4, 20),
        "language_requirement": ["English", "Hindi"],
    },
    {
        "id": "8",
        "title": "Cloud Computing Intern",
        "company": "CloudSphere Technologies",
        "location": "Chennai",
        "state": "Tamil Nadu",
        "duration": "5 months",
        "stipend": "₹18,500/month",
        "skills": ["AWS", "Docker", "Kubernetes", "DevOps Basics"],
        "type": "Cloud",
        "category": "Cloud Engineering",
        "remote": True,
        "description": "Support cloud engineers in building and maintaining scalable infrastructure.",
        "requirements": ["Basic AWS knowledge", "Linux commands", "Understanding of containers"],
        "benefits": ["AWS free credits", "Career mentoring"],
        "application_deadline": date(2024, 4, 18),
        "start_date": date(2024, 5, 5),
        "language_requirement": ["English"],
    },
    {
        "id": "9",
        "title": "Data Engineering Intern",
        "company": "BigData Works",
        "location": "Mumbai",
        "state": "Maharashtra",
        "duration": "6 months",
        "stipend": "₹22,000/month",
        "skills": ["Python", "SQL", "Hadoop", "Spark"],
        "type": "Analytics",
        "category": "Big Data",
        "remote": False,
        "description": "Assist in building ETL pipelines and optimizing data flows.",
        "requirements": ["Knowledge of SQL", "Basics of distributed systems", "Python scripting"],
        "benefits": ["Big Data tools training", "Certificate", "Full-time conversion"],
        "application_deadline": date(2024, 4, 12),
        "start_date": date(2024, 4, 30),
        "suitable_for_first_timers": False,
        "language_requirement": ["English"],
    },
    {
        "id": "10",
        "title": "Software Testing Intern",
        "company": "QualitySoft Solutions",
        "location": "Delhi NCR",
        "state": "Delhi",
        "duration": "3 months",
        "stipend": "₹12,000/month",
        "skills": ["Selenium", "Test Cases", "Automation Testing", "Bug Tracking"],
        "type": "Quality Assurance",
        "category": "Software Testing",
        "remote": False,
        "description": "Perform manual and automated testing of software modules and ensure quality standards.",
        "requirements": ["Basic testing knowledge", "Attention to detail", "Understanding of SDLC"],
        "benefits": ["Testing certification", "Hands-on automation experience"],
        "application_deadline": date(2024, 5, 12),
        "start_date": date(2024, 6, 1),
        "language_requirement": ["English", "Hindi"],
    },
]


def placeholder_internships() -> List[Internship]:
    return [Internship(created_at=_CREATED, **item) for item in _INTERNSHIPS]


def placeholder_applications(user_id: str) -> List[Application]:
    return [
        Application(
            id="1", user_id=user_id, internship_id="1",
            internship_title="Software Development Intern", company_name="TechCorp Solutions",
            location="Bangalore, Karnataka", duration="3 months",
            status=ApplicationStatus.pending,
            applied_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
            notes="Application submitted successfully. Waiting for initial screening."
        ),
        Application(
            id="2", user_id=user_id, internship_id="2",
            internship_title="Digital Marketing Assistant", company_name="Creative Agency Pvt Ltd",
            location="Mumbai, Maharashtra", duration="4 months",
            status=ApplicationStatus.accepted,
            applied_at=datetime(2024, 1, 10, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 20, tzinfo=timezone.utc),
            notes="Congratulations! You have been selected for the internship."
        ),
        Application(
            id="3", user_id=user_id, internship_id="3",
            internship_title="Data Analysis Trainee", company_name="DataViz Corp",
            location="Delhi NCR", duration="6 months",
            status=ApplicationStatus.rejected,
            applied_at=datetime(2024, 1, 5, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 18, tzinfo=timezone.utc),
            notes="Thank you for your interest. We have decided to move forward with other candidates."
        ),
    ]


def placeholder_saved_internships(user_id: str) -> List[SavedInternship]:
    return [
        SavedInternship(
            id="1", user_id=user_id, internship_id="1",
            internship_title="Software Development Intern", company_name="TechCorp Solutions",
            location="Bangalore, Karnataka", duration="3 months", stipend="₹15,000/month",
            skills=["JavaScript", "React", "Python", "Git"], remote=True,
            saved_at=datetime(2024, 1, 15, tzinfo=timezone.utc)
        ),
        SavedInternship(
            id="2", user_id=user_id, internship_id="4",
            internship_title="Content Writing Intern", company_name="MediaHub Communications",
            location="Chennai, Tamil Nadu", duration="3 months", stipend="₹10,000/month",
            skills=["Content Writing", "SEO", "WordPress", "Research"], remote=True,
            saved_at=datetime(2024, 1, 12, tzinfo=timezone.utc)
        ),
    ]


def placeholder_notifications(user_id: str) -> List[Notification]:
    return [
        Notification(
            id="1", user_id=user_id, type=NotificationType.application_update,
            title="Application Status Update",
            message="Your application for Software Development Intern at TechCorp Solutions has been accepted!",
            read=False, created_at=datetime(2024, 1, 20, 10, 30, tzinfo=timezone.utc)
        ),
        Notification(
            id="2", user_id=user_id, type=NotificationType.new_internship,
            title="New Internship Match",
            message="We found a new internship that matches your profile: UI/UX Design Intern at Creative Studio.",
            read=False, created_at=datetime(2024, 1, 19, 14, 15, tzinfo=timezone.utc)
        ),
        Notification(
            id="3", user_id=user_id, type=NotificationType.deadline_reminder,
            title="Application Deadline Reminder",
            message="The application deadline for Data Analysis Trainee at DataViz Corp is in 3 days.",
            read=True, created_at=datetime(2024, 1, 18, 9, 0, tzinfo=timezone.utc)
        ),
        Notification(
            id="4", user_id=user_id, type=NotificationType.system,
            title="Profile Completion",
            message="Complete your profile to get better internship recommendations.",
            read=True, created_at=datetime(2024, 1, 15, 16, 45, tzinfo=timezone.utc)
        ),
    ]
