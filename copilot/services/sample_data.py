"""
Sample catalog used to seed an empty store.
"""

from copilot.schemas.schemas import InternshipBase, ProjectBase, ProjectDifficulty


SAMPLE_INTERNSHIPS = [
    InternshipBase(
        title="Frontend Developer Intern",
        company="TechCorp Solutions",
        location="Remote",
        stipend="15000",
        duration="3-6 months",
        required_skills=["React", "JavaScript", "CSS", "HTML"],
        description="Build modern web applications using React and JavaScript",
    ),
    InternshipBase(
        title="ML Engineer Intern",
        company="DataTech Labs",
        location="Bangalore",
        stipend="25000",
        duration="6 months",
        required_skills=["Python", "TensorFlow", "SQL"],
        description="Work on machine learning projects and data analysis",
    ),
    InternshipBase(
        title="Backend Developer",
        company="StartupXYZ",
        location="Remote",
        stipend="20000",
        duration="4-6 months",
        required_skills=["Node.js", "MongoDB", "APIs", "Express"],
        description="Develop scalable backend services and APIs",
    ),
]


SAMPLE_PROJECTS = [
    ProjectBase(
        title="E-Commerce Dashboard",
        description=(
            "Build a comprehensive admin dashboard for an e-commerce platform with "
            "real-time analytics, inventory management, and customer insights using "
            "React and Node.js."
        ),
        difficulty=ProjectDifficulty.intermediate,
        duration="2-3 weeks",
        technologies=["React", "Node.js", "MongoDB", "Chart.js"],
        features=["Real-time sales analytics", "Inventory management system", "Customer behavior insights"],
    ),
    ProjectBase(
        title="AI Chatbot Assistant",
        description=(
            "Create an intelligent chatbot using natural language processing and machine "
            "learning. Integrate with popular messaging platforms and implement "
            "context-aware conversations."
        ),
        difficulty=ProjectDifficulty.advanced,
        duration="4-5 weeks",
        technologies=["Python", "TensorFlow", "NLP", "Flask"],
        features=["Natural language understanding", "Context-aware responses", "Multi-platform integration"],
    ),
    ProjectBase(
        title="Personal Finance Tracker",
        description=(
            "Build a comprehensive personal finance management app with expense tracking, "
            "budget planning, and financial goal setting using React and local storage."
        ),
        difficulty=ProjectDifficulty.beginner,
        duration="1-2 weeks",
        technologies=["React", "JavaScript", "LocalStorage", "CSS"],
        features=["Expense categorization", "Budget planning tools", "Visual spending reports"],
    ),
]
