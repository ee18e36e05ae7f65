"""Seed faculty list used when no remote directory is configured.

Each professor carries the subjects students most often ask about. The
list doubles as the source of the substring suggestions shown while a
student types a professor or subject name.
"""

import re
from typing import Any

from prof_rag.search.normalizer import fold
from prof_rag.search.patterns import strip_honorifics

FACULTY: list[dict[str, Any]] = [
    {
        "name": "Prof. Dr. Adalbert Wilhelm",
        "subjects": ["Statistics", "Data Science", "Business Analytics"],
    },
    {
        "name": "Prof. Dr. Sven C. Voelpel",
        "subjects": ["Business Administration", "Management", "Leadership"],
    },
    {
        "name": "Prof. Dr. Karen Smith Stegen",
        "subjects": ["Political Science", "International Relations", "Energy Policy"],
    },
    {
        "name": "Prof. Dr. Marco Verweij",
        "subjects": ["Political Science", "Public Policy", "Environmental Policy"],
    },
    {
        "name": "Prof. Dr. Tobias ten Brink",
        "subjects": ["Chinese Economy", "International Business", "Asian Studies"],
    },
    {
        "name": "Prof. Dr. Achim Schlüter",
        "subjects": [
            "Social Systems",
            "Ecological Economics",
            "Environmental Policy",
        ],
    },
    {
        "name": "Prof. Dr. Hilke Brockmann",
        "subjects": ["Sociology", "Social Science", "Demography"],
    },
    {
        "name": "Prof. Dr. Christian Stamov Roßnagel",
        "subjects": ["Organizational Behavior", "Management", "Business Psychology"],
    },
    {
        "name": "Prof. Dr. Christoph Lattemann",
        "subjects": [
            "Business Administration",
            "Information Management",
            "Digital Business",
        ],
    },
    {
        "name": "Prof. Dr. Andreas Seebeck",
        "subjects": ["Accounting", "Auditing", "Financial Management"],
    },
    {
        "name": "Prof. Dr. Colin Vance",
        "subjects": ["Quantitative Methods", "Economics", "Data Analysis"],
    },
    {
        "name": "Prof. Dr. Werner Nau",
        "subjects": ["Chemistry", "Business Operations", "Academic Administration"],
    },
    {
        "name": "Prof. Dr. Alexander Omelchenko",
        "subjects": ["Mathematics", "Computer Science", "Engineering"],
    },
    {
        "name": "Prof. Dr. Susanne Illenberger",
        "subjects": ["Biochemistry", "Cell Biology", "Science Administration"],
    },
    {
        "name": "Prof. Dr. Raymond O. Wells",
        "subjects": ["Mathematics", "Applied Mathematics", "Mathematical Analysis"],
    },
    {
        "name": "Prof. Dr. Isabel Wünsche",
        "subjects": ["Art History", "Visual Arts", "Cultural Studies"],
    },
    {
        "name": "Prof. Dr. Klaus Boehnke",
        "subjects": [
            "Social Science Methodology",
            "Social Research",
            "Quantitative Methods",
        ],
    },
    {
        "name": "Prof. Dr. Gert Brunekreeft",
        "subjects": ["Energy Economics", "Energy Policy", "Market Regulation"],
    },
    {
        "name": "Prof. Dr. Stanislav Milkov Chankov",
        "subjects": ["Supply Chain Management", "Operations Management", "Logistics"],
    },
    {
        "name": "Prof. Dr. Maheshi Danthurebandara",
        "subjects": [
            "Sustainable Management",
            "Business Sustainability",
            "Environmental Management",
        ],
    },
    {
        "name": "Prof. Dr. Fabian T. Dehos",
        "subjects": ["Economics", "Microeconomics", "Industrial Organization"],
    },
    {
        "name": "Prof. Dr. Franziska Deutsch",
        "subjects": ["Political Science", "Public Policy", "Governance"],
    },
    {
        "name": "Prof. Dr. Sonja Diercks-Horn",
        "subjects": ["Biochemistry", "Cell Biology", "Molecular Biology"],
    },
    {
        "name": "Prof. Dr. Patrice Donfack",
        "subjects": ["Physics", "Data Science", "Laser Physics"],
    },
    {
        "name": "Prof. Dr. Georgi Dragolov",
        "subjects": [
            "Quantitative Research Methods",
            "Social Research",
            "Data Analysis",
        ],
    },
    {
        "name": "Prof. Dr. Steffen Eickemeyer",
        "subjects": [
            "Lean Management",
            "Operations Management",
            "Process Improvement",
        ],
    },
    {
        "name": "Prof. Dr. Omid Fatahi Valilai",
        "subjects": [
            "Industrial Engineering",
            "Manufacturing Systems",
            "Operations Research",
        ],
    },
    {
        "name": "Prof. Dr. Philipp Fischer",
        "subjects": ["Marine Biology", "Oceanography", "Marine Ecosystems"],
    },
    {
        "name": "Prof. Dr. Thomas Frauenheim",
        "subjects": [
            "Computational Materials Science",
            "Physics",
            "Materials Science",
        ],
    },
    {
        "name": "Prof. Dr. Giuseppe Thadeu Freitas de Abreu",
        "subjects": ["Electrical Engineering", "Communications", "Signal Processing"],
    },
    {
        "name": "Prof. Dr. Jürgen Fritz",
        "subjects": ["Biophysics", "Molecular Biology", "Protein Science"],
    },
    {
        "name": "Prof. Dr. Jakob Fruchtmann",
        "subjects": ["Sociology", "Social Research", "Social Theory"],
    },
    {
        "name": "Prof. Dr. Isak Frumin",
        "subjects": [
            "Higher Education",
            "Education Innovation",
            "Educational Policy",
        ],
    },
    {
        "name": "Prof. Dr. Detlef Gabel",
        "subjects": ["Chemistry", "Inorganic Chemistry", "Chemical Education"],
    },
    {
        "name": "Prof. Dr. Ben Godde",
        "subjects": ["Neuroscience", "Cognitive Science", "Brain Research"],
    },
    {
        "name": "Prof. Dr. Igors Gorbovickis",
        "subjects": ["Mathematics", "Applied Mathematics", "Mathematical Analysis"],
    },
    {
        "name": "Prof. Dr. Tilo Halaszovich",
        "subjects": ["Global Markets", "International Business", "Business Strategy"],
    },
    {
        "name": "Prof. Dr. Jan Olaf Härter",
        "subjects": ["Complex Systems", "Physics", "Systems Theory"],
    },
    {
        "name": "Prof. Dr. Sohaib S. Hassan",
        "subjects": ["Management Science", "Business Analytics", "Data Science"],
    },
    {
        "name": "Prof. Dr. Christopher Hausmann",
        "subjects": [
            "Project Management",
            "Business Administration",
            "Operations Management",
        ],
    },
    {
        "name": "Prof. Dr. Werner Henkel",
        "subjects": [
            "Electrical Engineering",
            "Communications",
            "Digital Signal Processing",
        ],
    },
    {
        "name": "Prof. Dr. Manfred Hinz",
        "subjects": ["Law", "African Studies", "Legal Studies"],
    },
    {
        "name": "Prof. Dr. Holm Hofmann",
        "subjects": ["Foundation Studies", "Academic Skills", "Study Preparation"],
    },
    {
        "name": "Prof. Dr. Mahdi Homayouni",
        "subjects": ["Industrial Engineering", "Management", "Operations Research"],
    },
    {
        "name": "Prof. Dr. Fangning Hu",
        "subjects": ["Electrical Engineering", "Power Systems", "Control Systems"],
    },
    {
        "name": "Prof. Dr. Marc-Thorsten Hütt",
        "subjects": [
            "Computational Systems Biology",
            "Bioinformatics",
            "Complex Systems",
        ],
    },
    {
        "name": "Prof. Dr. Torsten John",
        "subjects": ["Physical Chemistry", "Chemical Physics", "Molecular Science"],
    },
    {
        "name": "Prof. Dr. Felix Jonas",
        "subjects": ["Biochemistry", "Molecular Biology", "Protein Science"],
    },
    {
        "name": "Prof. Dr. Mojtaba Joodaki",
        "subjects": [
            "Computer Science",
            "Electrical Engineering",
            "Microelectronics",
        ],
    },
    {
        "name": "Prof. Dr. Arvid Kappas",
        "subjects": ["Psychology", "Emotion Research", "Social Psychology"],
    },
    {
        "name": "Prof. Dr. Boran Kartal",
        "subjects": ["Microbiology", "Environmental Microbiology", "Biotechnology"],
    },
    {
        "name": "Prof. Dr. Stefan Kettemann",
        "subjects": ["Complex Systems", "Physics", "Statistical Mechanics"],
    },
    {
        "name": "Prof. Dr. Muhammad Khalid",
        "subjects": ["Foundation Studies", "Academic Skills", "Study Preparation"],
    },
    {
        "name": "Prof. Dr. Mathias Klein",
        "subjects": [
            "Molecular Biotechnology",
            "Biochemistry",
            "Protein Engineering",
        ],
    },
    {
        "name": "Prof. Dr. Ulrich Kleinekathöfer",
        "subjects": [
            "Theoretical Physics",
            "Computational Physics",
            "Quantum Mechanics",
        ],
    },
    {
        "name": "Prof. Dr. Ulrich Kortz",
        "subjects": ["Chemistry", "Inorganic Chemistry", "Polyoxometalates"],
    },
    {
        "name": "Prof. Dr. Andrea Koschinsky",
        "subjects": ["Geosciences", "Marine Chemistry", "Environmental Science"],
    },
    {
        "name": "Prof. Dr. Kirill Krinkin",
        "subjects": ["Computer Science", "Software Engineering", "Data Technology"],
    },
    {
        "name": "Prof. Dr. Dmitry Kropotov",
        "subjects": ["Data Science", "Software Technology", "Computer Science"],
    },
    {
        "name": "Prof. Dr. Ulrich Kühnen",
        "subjects": ["Psychology", "Cross-Cultural Psychology", "Social Psychology"],
    },
    {
        "name": "Prof. Dr. Nikolai Kuhnert",
        "subjects": ["Chemistry", "Analytical Chemistry", "Food Chemistry"],
    },
    {
        "name": "Prof. Dr. Mandi Larsen",
        "subjects": ["Social Sciences", "Research Methods", "Social Theory"],
    },
    {
        "name": "Prof. Dr. Nikolai Leopold",
        "subjects": [
            "Applied Mathematics",
            "Mathematical Modeling",
            "Scientific Computing",
        ],
    },
    {
        "name": "Prof. Dr. Alexander Lerchl",
        "subjects": ["Biology", "Ethics", "Science & Technology"],
    },
    {
        "name": "Prof. Dr. Sonia Lippke",
        "subjects": [
            "Health Psychology",
            "Behavioral Medicine",
            "Clinical Psychology",
        ],
    },
    {
        "name": "Prof. Dr. Kinga Lipskoch",
        "subjects": ["Computer Science", "Software Engineering", "Programming"],
    },
    {
        "name": "Prof. Dr. Andreas Martin Lisewski",
        "subjects": ["Science", "Biology", "Scientific Computing"],
    },
    {
        "name": "Prof. Dr. Jan Lorenz",
        "subjects": [
            "Social Data Science",
            "Social Networks",
            "Computational Social Science",
        ],
    },
    {
        "name": "Prof. Dr. Stefan Lutz",
        "subjects": [
            "Distribution Logistics",
            "Supply Chain Management",
            "Operations Management",
        ],
    },
    {
        "name": "Prof. Dr. Keivan Mallahi Karai",
        "subjects": ["Mathematics", "Group Theory", "Algebra"],
    },
    {
        "name": "Prof. Dr. Arnulf Materny",
        "subjects": ["Chemical Physics", "Spectroscopy", "Physical Chemistry"],
    },
    {
        "name": "Prof. Dr. Francesco Maurelli",
        "subjects": ["Marine Systems", "Marine Robotics", "Autonomous Systems"],
    },
    {
        "name": "Prof. Dr. PingPing Meckel",
        "subjects": [
            "Management",
            "Business Administration",
            "Organizational Behavior",
        ],
    },
    {
        "name": "Prof. Dr. Matthias Meckel",
        "subjects": ["Business", "Management", "Business Administration"],
    },
    {
        "name": "Prof. Dr. Hildegard Meyer-Ortmanns",
        "subjects": ["Physics", "Complex Systems", "Statistical Mechanics"],
    },
    {
        "name": "Prof. Dr. Christian Müller",
        "subjects": ["Economics", "Business Economics", "Economic Theory"],
    },
    {
        "name": "Prof. Dr. Elke Nevoigt",
        "subjects": [
            "Molecular Biotechnology",
            "Metabolic Engineering",
            "Biochemistry",
        ],
    },
    {
        "name": "Prof. Dr. Thomas Nugent",
        "subjects": ["Chemistry", "Organic Chemistry", "Chemical Biology"],
    },
    {
        "name": "Prof. Dr. Marcel Oliver",
        "subjects": ["Mathematics", "Applied Mathematics", "Scientific Computing"],
    },
    {
        "name": "Prof. Dr. Ivan Ovsyannikov",
        "subjects": ["Mathematics", "Applied Mathematics", "Mathematical Analysis"],
    },
    {
        "name": "Prof. Dr. Ivan B. Penkov",
        "subjects": ["Mathematics", "Representation Theory", "Algebra"],
    },
    {
        "name": "Prof. Dr. Sören Petrat",
        "subjects": ["Mathematics", "Applied Mathematics", "Mathematical Physics"],
    },
    {
        "name": "Prof. Dr. Petr Popov",
        "subjects": [
            "Applied Mathematics",
            "Scientific Computing",
            "Numerical Analysis",
        ],
    },
    {
        "name": "Prof. Dr. Ilya Pozdnyakov",
        "subjects": ["Biochemistry", "Cell Biology", "Molecular Biology"],
    },
    {
        "name": "Prof. Dr. Tobias Preußer",
        "subjects": [
            "Mathematical Modeling",
            "Medical Processes",
            "Biomedical Engineering",
        ],
    },
    {
        "name": "Prof. Dr. Samaneh Rashidibajgan",
        "subjects": ["Computer Science", "Software Engineering", "Programming"],
    },
    {
        "name": "Prof. Dr. Gerd-Volker Röschenthaler",
        "subjects": ["Chemistry", "Organic Chemistry", "Chemical Synthesis"],
    },
    {
        "name": "Prof. Dr. Katrin Rosenthal",
        "subjects": ["Biotechnology", "Molecular Biology", "Protein Engineering"],
    },
    {
        "name": "Prof. Dr. Eoin Ryan",
        "subjects": ["Philosophy", "Ethics", "Philosophical Logic"],
    },
    {
        "name": "Prof. Dr. Max Schlenker",
        "subjects": ["Language", "Community Studies", "Cultural Studies"],
    },
    {
        "name": "Prof. Dr. Jürgen Schönwälder",
        "subjects": ["Computer Science", "Networking", "Distributed Systems"],
    },
    {
        "name": "Prof. Dr. Margrit Schreier",
        "subjects": ["Empirical Methods", "Humanities", "Social Sciences"],
    },
    {
        "name": "Prof. Dr. Florian Schupp",
        "subjects": ["Logistics", "Supply Chain Management", "Operations Management"],
    },
    {
        "name": "Prof. Dr. Peter Schupp",
        "subjects": ["Physics", "Theoretical Physics", "Quantum Mechanics"],
    },
    {
        "name": "Prof. Dr. Thomas Schwarzlose",
        "subjects": ["Teaching", "Laboratory Coordination", "Science Education"],
    },
    {
        "name": "Prof. Dr. Sebastian Springer",
        "subjects": ["Biochemistry", "Cell Biology", "Protein Science"],
    },
    {
        "name": "Prof. Dr. Jakob Suchan",
        "subjects": [
            "Computer Science",
            "Artificial Intelligence",
            "Machine Learning",
        ],
    },
    {
        "name": "Prof. Dr. Anna Tevyashova",
        "subjects": [
            "Medicinal Chemistry",
            "Drug Discovery",
            "Pharmaceutical Sciences",
        ],
    },
    {
        "name": "Prof. Dr. Laurenz Thomsen",
        "subjects": ["Geosciences", "Marine Geology", "Environmental Science"],
    },
    {
        "name": "Prof. Dr. Julia Timpe",
        "subjects": ["History", "Historical Research", "Cultural History"],
    },
    {
        "name": "Prof. Dr. Matthias Ullrich",
        "subjects": ["Microbiology", "Marine Biology", "Biotechnology"],
    },
    {
        "name": "Prof. Dr. Vikram Unnithan",
        "subjects": ["Geosciences", "Marine Geology", "Environmental Science"],
    },
    {
        "name": "Prof. Dr. Andrey Ustyuzhanin",
        "subjects": ["Computer Science", "Software Engineering", "Data Technology"],
    },
    {
        "name": "Prof. Dr. Yilmaz Uygun",
        "subjects": [
            "Logistics Engineering",
            "Supply Chain Management",
            "Process Technology",
        ],
    },
    {
        "name": "Prof. Dr. Dmitry Vetrov",
        "subjects": [
            "Computer Science",
            "Machine Learning",
            "Artificial Intelligence",
        ],
    },
    {
        "name": "Prof. Dr. Joachim Vogt",
        "subjects": ["Physics", "Applied Physics", "Materials Science"],
    },
    {
        "name": "Prof. Dr. Richard Wagner",
        "subjects": ["Biophysics", "Molecular Biology", "Protein Science"],
    },
    {
        "name": "Prof. Dr. Veit Wagner",
        "subjects": ["Physics", "Materials Science", "Optoelectronics"],
    },
    {
        "name": "Prof. Dr. Markus Wenzel",
        "subjects": [
            "Medical Computing",
            "Artificial Intelligence",
            "Healthcare Technology",
        ],
    },
    {
        "name": "Prof. Dr. Hendro Wicaksono",
        "subjects": ["Data Science", "Industrial Systems", "Decision Making"],
    },
    {
        "name": "Prof. Dr. Björn Windshügel",
        "subjects": [
            "Computational Drug Discovery",
            "Medicinal Chemistry",
            "Drug Design",
        ],
    },
    {
        "name": "Prof. Dr. Katja Windt",
        "subjects": [
            "Supply Chain Engineering",
            "Logistics",
            "Operations Management",
        ],
    },
    {
        "name": "Prof. Dr. Mathias Winterhalter",
        "subjects": ["Biophysics", "Membrane Biology", "Protein Transport"],
    },
    {
        "name": "Prof. Dr. Ivan P. Yamshchikov",
        "subjects": ["Computer Science", "Software Engineering", "Data Science"],
    },
    {
        "name": "Prof. Dr. Song Yan",
        "subjects": ["Psychology", "Social Psychology", "Behavioral Science"],
    },
    {
        "name": "Prof. Dr. Suhail Yousaf",
        "subjects": ["Computer Science", "Software Engineering", "Programming"],
    },
    {
        "name": "Prof. Dr. Joaquin Aguado",
        "subjects": ["Computer Science", "Software Engineering", "Programming"],
    },
    {
        "name": "Prof. Dr. Amr Alanwar Abdelhafez",
        "subjects": ["Computer Science", "Robotics", "Control Systems"],
    },
    {
        "name": "Prof. Dr. Lennart Ante",
        "subjects": ["Entrepreneurial Finance", "Finance", "Business Administration"],
    },
    {
        "name": "Prof. Dr. Michael Bau",
        "subjects": ["Geosciences", "Environmental Science", "Earth Sciences"],
    },
    {
        "name": "Prof. Dr. Peter Baumann",
        "subjects": ["Computer Science", "Data Management", "Big Data"],
    },
    {
        "name": "Prof. Dr. Olivier Berthod",
        "subjects": ["Economics", "Business Economics", "Economic Theory"],
    },
    {
        "name": "Prof. Dr. Andreas Birk",
        "subjects": ["Electrical Engineering", "Computer Science", "Robotics"],
    },
    {
        "name": "Prof. Dr. Hendrik Birus",
        "subjects": ["Comparative Literature", "Cultural Studies", "Humanities"],
    },
    {
        "name": "Prof. Dr. Mathias Bode",
        "subjects": ["Electrical Engineering", "Power Systems", "Control Systems"],
    },
    {
        "name": "Prof. Dr. Klaudia Brix",
        "subjects": ["Cell Biology", "Biochemistry", "Molecular Biology"],
    },
    {
        "name": "Prof. Dr. Marina Christodoulou",
        "subjects": ["Philosophy", "Ethics", "Philosophical Logic"],
    },
]

SUBJECTS: list[str] = sorted({subject for prof in FACULTY for subject in prof["subjects"]})

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def professor_id(name: str) -> str:
    """Stable slug id for a professor name ("Prof. Dr. Jürgen Fritz" -> "jurgen-fritz")."""
    return _SLUG_SEPARATORS.sub("-", fold(strip_honorifics(name))).strip("-")


def faculty_entries(faculty: list[dict[str, Any]] | None = None) -> list[dict[str, Any]]:
    """Convert the faculty list into raw directory entries."""
    return [
        {
            "id": professor_id(prof["name"]),
            "metadata": {
                "name": prof["name"],
                "department": prof.get("department", ""),
                "subject": prof.get("subjects", []),
            },
        }
        for prof in (FACULTY if faculty is None else faculty)
    ]


def get_professor_suggestions(text: str) -> list[dict[str, Any]]:
    """Professors whose name or one of whose subjects contains ``text``.

    Matching ignores case and diacritics, so "schonwalder" finds
    "Prof. Dr. Jürgen Schönwälder".
    """
    if not text or not text.strip():
        return []

    needle = fold(text.strip())
    return [
        prof
        for prof in FACULTY
        if needle in fold(prof["name"])
        or any(needle in fold(subject) for subject in prof["subjects"])
    ]
