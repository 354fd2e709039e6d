"""Content written on first start so a fresh site is not empty."""

from __future__ import annotations

DEFAULT_CONTACT_INFO = {
    "email": "hello@example.com",
    "linkedin_url": "https://linkedin.com/in/your-profile",
    "github_url": "https://github.com/your-username",
    "phone_number": None,
    "location": "Remote",
}

DEFAULT_CONTENT: dict[str, list[dict]] = {
    "blogs": [
        {
            "title": "Building Voice-Driven AI Assistants with Advanced NLP",
            "url": "https://medium.com/@example/building-voice-ai-assistants",
            "description": "Creating voice assistants with modern NLP techniques and speech recognition.",
            "image_url": None,
            "published_at": "2024-01-15T00:00:00Z",
            "featured": True,
        },
        {
            "title": "Machine Learning Pipeline Optimization in Production",
            "url": "https://dev.to/example/ml-pipeline-optimization",
            "description": "Practices for running machine learning pipelines in production environments.",
            "image_url": None,
            "published_at": "2024-02-01T00:00:00Z",
            "featured": True,
        },
    ],
    "certifications": [
        {
            "title": "AWS Certified AI Practitioner (AIF-C01)",
            "issuer": "AWS",
            "year": "2024",
            "image_url": "https://images.credly.com/size/220x220/images/778bde6c-ad1c-4312-ac33-2fa40d50a147/image.png",
            "description": "Foundational knowledge of AWS AI/ML services.",
            "featured": True,
        },
        {
            "title": "Data Analysis with Python",
            "issuer": "IBM",
            "year": "2023",
            "image_url": None,
            "description": "Data analysis with Python.",
            "featured": True,
        },
    ],
    "skills": [
        {
            "name": "Python",
            "category": "Programming",
            "logo_url": "https://cdn.jsdelivr.net/gh/devicons/devicon/icons/python/python-original.svg",
            "featured": True,
        },
        {
            "name": "TensorFlow",
            "category": "Machine Learning",
            "logo_url": "https://cdn.jsdelivr.net/gh/devicons/devicon/icons/tensorflow/tensorflow-original.svg",
            "featured": True,
        },
        {
            "name": "AWS",
            "category": "Cloud",
            "logo_url": "https://cdn.jsdelivr.net/gh/devicons/devicon/icons/amazonwebservices/amazonwebservices-original.svg",
            "featured": True,
        },
    ],
}
