from feedbox import create_app
from feedbox.extensions import db
from feedbox.services.board import get_board
from feedbox.models.user import User, student_id_for
from feedbox.utils.enums import UserRole, FeedbackStatus

app = create_app()

DEMO_POSTS = [
    ("student1@example.com", "food and mess", None, "Please add more vegetarian options at dinner."),
    ("student2@example.com", "facilities", None, "The library closes too early during exams."),
    ("student1@example.com", "others", "Wifi", "Hostel wifi drops every evening after 9pm."),
    ("student3@example.com", "academics", None, "Lecture slides should be uploaded before class."),
]

with app.app_context():
    if app.config["STORAGE_BACKEND"] == "database":
        # ensure tables exist (non-destructive: won't alter existing columns)
        db.create_all()

    board = get_board()
    if board.feedbacks.list_all():
        print("Board already has feedback, skipping seed")
    else:
        for email, category, custom, content in DEMO_POSTS:
            author = User(
                id=student_id_for(email),
                role=UserRole.STUDENT.value,
                email=email,
                name=board.allocator.assign(email),
            )
            board.feedbacks.submit(author, category, content, custom)

        newest = board.feedbacks.list_all()[0]
        board.feedbacks.set_status(newest.id, FeedbackStatus.ACCEPTED.value)
        print(f"Seeded {len(DEMO_POSTS)} feedback posts")
