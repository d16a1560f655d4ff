class Review:
    """A verified review, as written to the content store."""

    FIELDS = ("courseId", "semesterId", "rating", "difficulty", "workload", "body", "username")

    def __init__(self, course_id, semester_id, rating, difficulty, workload, body, username):
        self.course_id = course_id
        self.semester_id = semester_id
        self.rating = rating
        self.difficulty = difficulty
        self.workload = workload
        self.body = body
        self.username = username

    @classmethod
    def from_payload(cls, payload):
        # Anything outside FIELDS (the verification code, stray keys) is dropped here
        return cls(
            course_id=payload["courseId"],
            semester_id=payload["semesterId"],
            rating=payload["rating"],
            difficulty=payload["difficulty"],
            workload=payload["workload"],
            body=payload["body"],
            username=payload["username"],
        )

    def to_document(self):
        return {
            "_type": "review",
            "course": {"_type": "reference", "_ref": self.course_id},
            "semester": {"_type": "reference", "_ref": self.semester_id},
            "rating": self.rating,
            "difficulty": self.difficulty,
            "workload": self.workload,
            "body": self.body,
            "username": self.username,
        }

    def to_dict(self):
        return {
            "courseId": self.course_id,
            "semesterId": self.semester_id,
            "rating": self.rating,
            "difficulty": self.difficulty,
            "workload": self.workload,
            "body": self.body,
            "username": self.username,
        }
