SCHEMA = {
    "contact": {
        "name": "string",
        "title": "string (headline as written in the resume header, else empty)",
        "email": "string",
        "phone": "string",
        "location": "string",
        "linkedin": "string",
        "github": "string",
    },
    "summary": "string",
    "sectionOrder": [
        "summary | experience | skills | education | projects | certifications | awards | publications"
    ],
    "experience": [
        {
            "id": "string (6 random alphanumeric chars)",
            "company": "string",
            "role": "string",
            "location": "string",
            "dates": "string (copied exactly as written)",
            "bullets": ["string", "..."],
        }
    ],
    "skills": [
        {
            "id": "string",
            "label": "string (e.g. Programming Languages)",
            "skills": ["string", "..."],
        }
    ],
    "education": [
        {
            "id": "string",
            "institution": "string",
            "degree": "string",
            "dates": "string",
            "details": "string",
        }
    ],
    "projects": [
        {
            "id": "string",
            "name": "string",
            "description": "string",
            "dates": "string",
            "bullets": ["string", "..."],
        }
    ],
    "certifications": [
        {
            "id": "string",
            "name": "string",
            "issuer": "string",
            "date": "string",
            "details": "string",
        }
    ],
    "awards": [
        {
            "id": "string",
            "name": "string",
            "description": "string",
            "date": "string",
        }
    ],
    "publications": [
        {
            "id": "string",
            "title": "string",
            "venue": "string",
            "date": "string",
            "description": "string",
        }
    ],
}
