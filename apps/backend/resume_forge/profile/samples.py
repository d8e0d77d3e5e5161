from resume_forge.schemas.pydantic.structured_resume import ResumeRecord
from .migration import migrate_resume_data

SAMPLE_RESUME = {
    "contact": {
        "name": "Alex Chen",
        "title": "Senior Software Engineer",
        "email": "alex.chen@email.com",
        "phone": "(555) 123-4567",
        "location": "San Francisco, CA",
        "linkedin": "linkedin.com/in/alexchen",
        "github": "github.com/alexchen",
    },
    "summary": (
        "Software engineer with 6+ years of experience building scalable distributed systems "
        "and cloud-native applications. Proven track record designing high-throughput "
        "microservices handling 10M+ daily requests."
    ),
    "sectionOrder": ["summary", "experience", "skills", "education"],
    "experience": [
        {
            "id": "exp-1",
            "company": "Acme Corp",
            "role": "Senior Software Engineer",
            "dates": "2022 - Present",
            "bullets": [
                "Architected event-driven microservices processing 10M+ events/day using Kafka and Redis Streams, reducing end-to-end latency by 40%",
                "Led migration from monolith to Kubernetes-based architecture, improving deployment frequency from bi-weekly to multiple daily releases",
                "Mentored team of 4 junior engineers through structured code reviews and weekly architecture sessions",
            ],
        },
        {
            "id": "exp-2",
            "company": "StartupXYZ",
            "role": "Software Engineer",
            "dates": "2019 - 2022",
            "bullets": [
                "Built real-time data pipeline processing 2TB+ daily using Apache Flink and AWS Kinesis for analytics platform serving 500K users",
                "Developed internal CLI tooling in Go adopted by 30+ engineers, reducing average onboarding time by 40%",
            ],
        },
    ],
    "skills": [
        {"id": "skills-lang", "label": "Programming Languages", "skills": ["Go", "TypeScript", "Python"]},
        {"id": "skills-infra", "label": "Cloud & Infrastructure", "skills": ["Kubernetes", "Docker", "Terraform", "AWS"]},
        {"id": "skills-data", "label": "Databases & Messaging", "skills": ["PostgreSQL", "Redis", "Kafka"]},
        {"id": "skills-tools", "label": "Tools & Practices", "skills": ["CI/CD"]},
    ],
    "education": [
        {
            "id": "edu-1",
            "institution": "MIT",
            "degree": "B.S. Computer Science",
            "dates": "2014 - 2018",
            "details": "Dean's List, Teaching Assistant for Distributed Systems",
        }
    ],
}


def create_sample_resume() -> ResumeRecord:
    return migrate_resume_data(SAMPLE_RESUME)
