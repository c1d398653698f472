def course(code, description, tags, units=3):
    return {"code": code, "description": description, "units": units, "tags": list(tags)}


SAMPLE_CURRICULUM = [
    {
        "1st Sem": [
            course("CS101", "Intro to Programming", ["Programming", "BSIT"]),
            course("GE101", "Purposive Communication", ["General Education"]),
        ],
        "2nd Sem": [
            course("IS102", "Database Fundamentals", ["Database Management", "BSIS"]),
        ],
    },
    {
        "1st Sem": [
            course("IT201", "Web Development 1", ["Web Development"]),
            course("IS201", "Enterprise Architecture", ["BSIS"]),
        ],
        "Summer": course("IT299", "Advanced Programming", ["Programming", "BSIT"], units=2.5),
    },
]
