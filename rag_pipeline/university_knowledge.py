"""
university_knowledge.py
=======================
Bundled knowledge base for CampusConnect AI.

General academic-policy guidance modelled on common Malaysian public and
private university practice.  Dates, fees and thresholds differ between
institutions, which is why every answer produced from this table carries a
"verify with your institution" note.

Each entry stores:
  topic       — short label shown to the student
  category    — grouping tag used by category search and the quick-answer hint
  question    — canonical question the entry answers
  answer      — full answer text
  keywords    — matching boosts
  importance  — ranking weight (high 1.3×, medium 1.1×, low 1.0×)
"""

from typing import List

from rag_pipeline.knowledge_base import Importance, KnowledgeItem

HIGH   = Importance.high
MEDIUM = Importance.medium
LOW    = Importance.low


UNIVERSITY_KNOWLEDGE: List[KnowledgeItem] = [

    # ── Registration ────────────────────────────────────────────────────────
    KnowledgeItem(
        topic="Course Registration",
        category="Registration",
        question="How do I register for courses each semester?",
        answer=(
            "Course registration is done online through the student portal during the "
            "registration week announced in the academic calendar, usually two weeks before "
            "the semester starts. Check your programme structure, clear any outstanding fees "
            "and get your academic advisor's approval before confirming your courses."
        ),
        keywords=("register", "registration", "course", "enrol", "enrolment", "portal", "semester"),
        importance=HIGH,
    ),
    KnowledgeItem(
        topic="Late Registration",
        category="Registration",
        question="What happens if I miss the registration deadline?",
        answer=(
            "Late registration is normally allowed during the first week of the semester with a "
            "late registration fee. After that week you must apply to the faculty with a valid "
            "reason; unregistered students cannot sit for final examinations."
        ),
        keywords=("late", "deadline", "registration", "penalty", "fee"),
        importance=HIGH,
    ),
    KnowledgeItem(
        topic="Add and Drop Courses",
        category="Registration",
        question="When can I add or drop a course?",
        answer=(
            "The add/drop period runs during the first two weeks of the semester. Courses dropped "
            "within this period do not appear on your transcript. You must stay within the minimum "
            "and maximum credit load for your programme, typically 12 to 20 credit hours."
        ),
        keywords=("add", "drop", "credit", "load", "change course"),
        importance=MEDIUM,
    ),

    # ── Academic ────────────────────────────────────────────────────────────
    KnowledgeItem(
        topic="CGPA Calculation",
        category="Academic",
        question="How is CGPA calculated?",
        answer=(
            "CGPA is computed by multiplying the grade point of each course by its credit hours, "
            "summing these values across all semesters and dividing by the total credit hours "
            "attempted. Most universities use a 4.00 scale where A = 4.00, B = 3.00 and C = 2.00."
        ),
        keywords=("cgpa", "gpa", "grade point", "average", "pointer"),
        importance=HIGH,
    ),
    KnowledgeItem(
        topic="Academic Probation",
        category="Academic",
        question="What is academic probation?",
        answer=(
            "Students whose GPA falls below 2.00 in a semester are usually placed on academic "
            "probation. Two consecutive probation semesters, or a CGPA below 1.50, may lead to "
            "dismissal. Students on probation must meet their academic advisor and may have a "
            "reduced credit load."
        ),
        keywords=("probation", "dismissal", "low gpa", "warning", "fail"),
        importance=HIGH,
    ),
    KnowledgeItem(
        topic="Dean's List",
        category="Academic",
        question="How do I qualify for the Dean's List?",
        answer=(
            "The Dean's List recognises students who achieve a semester GPA of 3.50 or higher "
            "while taking a full credit load with no failed courses."
        ),
        keywords=("dean", "award", "excellence", "honour"),
        importance=LOW,
    ),
    KnowledgeItem(
        topic="Attendance Requirement",
        category="Academic",
        question="What is the minimum class attendance?",
        answer=(
            "Most universities require at least 80% attendance for every course. Students below "
            "the threshold may be barred from the final examination for that course."
        ),
        keywords=("attendance", "absent", "barred", "class", "lecture"),
        importance=MEDIUM,
    ),

    # ── Examinations ────────────────────────────────────────────────────────
    KnowledgeItem(
        topic="Final Examination Rules",
        category="Exams",
        question="What are the rules for final examinations?",
        answer=(
            "Bring your student ID card and examination slip to every paper. Arrive at least "
            "15 minutes early; students more than 30 minutes late are not admitted. Mobile "
            "phones, smart watches and unauthorised notes are prohibited in the examination hall."
        ),
        keywords=("exam", "examination", "final", "rules", "hall", "slip"),
        importance=HIGH,
    ),
    KnowledgeItem(
        topic="Grade Appeal",
        category="Exams",
        question="How do I appeal my examination results?",
        answer=(
            "Submit an appeal form to the examination unit within 14 days of the official results "
            "release, together with the appeal fee. Your script will be re-marked by an "
            "independent examiner and the final grade may go up or down."
        ),
        keywords=("appeal", "remark", "re-mark", "review", "result", "grade"),
        importance=HIGH,
    ),
    KnowledgeItem(
        topic="Missed Examination",
        category="Exams",
        question="What should I do if I miss an exam due to illness?",
        answer=(
            "Inform the faculty as soon as possible and submit a medical certificate from a "
            "registered clinic or the university health centre within 48 hours. Approved cases "
            "are given a special examination, usually before the next semester."
        ),
        keywords=("miss", "missed", "sick", "medical certificate", "special exam", "illness"),
        importance=HIGH,
    ),

    # ── Financial ───────────────────────────────────────────────────────────
    KnowledgeItem(
        topic="Tuition Fee Payment",
        category="Financial",
        question="When do I need to pay my tuition fees?",
        answer=(
            "Tuition fees are due before the end of the registration week each semester. Payment "
            "can be made through online banking, the student portal or the bursary counter. "
            "Students with outstanding fees may have their registration and results blocked."
        ),
        keywords=("fee", "fees", "tuition", "payment", "bursary", "pay"),
        importance=MEDIUM,
    ),
    KnowledgeItem(
        topic="PTPTN Loan",
        category="Financial",
        question="How do I apply for a PTPTN education loan?",
        answer=(
            "Apply online through the PTPTN portal once you have your university offer letter and "
            "a Simpan SSPN account. Disbursement is made each semester after registration is "
            "confirmed by the university."
        ),
        keywords=("ptptn", "loan", "financial aid", "sspn", "funding"),
        importance=MEDIUM,
    ),
    KnowledgeItem(
        topic="Scholarships",
        category="Financial",
        question="What scholarships are available for students?",
        answer=(
            "Scholarships are offered by the university, government agencies such as JPA and MARA, "
            "and private foundations. Most require a minimum CGPA of 3.00 and active "
            "co-curricular involvement. Watch the student portal for application windows."
        ),
        keywords=("scholarship", "jpa", "mara", "bursary", "sponsor"),
        importance=MEDIUM,
    ),

    # ── Student Services ────────────────────────────────────────────────────
    KnowledgeItem(
        topic="Health Centre",
        category="Student Services",
        question="Where can I get medical treatment on campus?",
        answer=(
            "The university health centre provides free outpatient treatment for registered "
            "students on weekdays. For emergencies after hours, call campus security who will "
            "arrange transport to the nearest hospital."
        ),
        keywords=("health", "medical", "clinic", "doctor", "emergency", "sick"),
        importance=HIGH,
    ),
    KnowledgeItem(
        topic="Counselling Services",
        category="Student Services",
        question="Is there counselling support for students?",
        answer=(
            "Free and confidential counselling is available at the student counselling unit. "
            "Appointments can be booked online or by walking in during office hours."
        ),
        keywords=("counselling", "counseling", "stress", "mental health", "support"),
        importance=MEDIUM,
    ),
    KnowledgeItem(
        topic="Library Services",
        category="Student Services",
        question="What are the library opening hours?",
        answer=(
            "The main library usually opens from 8am to 10pm on weekdays and has shorter hours on "
            "weekends. Extended hours apply during the examination period."
        ),
        keywords=("library", "books", "study", "hours"),
        importance=LOW,
    ),

    # ── Campus Life ─────────────────────────────────────────────────────────
    KnowledgeItem(
        topic="Hostel Application",
        category="Campus Life",
        question="How do I apply for hostel accommodation?",
        answer=(
            "Hostel placement is applied for through the student portal before each semester. "
            "Priority is given to first-year and international students and to those with "
            "active co-curricular merit points."
        ),
        keywords=("hostel", "accommodation", "college", "room", "residence"),
        importance=MEDIUM,
    ),
    KnowledgeItem(
        topic="Student Clubs",
        category="Campus Life",
        question="How do I join student clubs and societies?",
        answer=(
            "Clubs recruit members during orientation week and club fairs. Co-curricular "
            "activities earn merit points that count towards hostel placement and graduation "
            "requirements."
        ),
        keywords=("club", "society", "co-curricular", "activity", "merit"),
        importance=LOW,
    ),

    # ── Graduation ──────────────────────────────────────────────────────────
    KnowledgeItem(
        topic="Graduation Requirements",
        category="Graduation",
        question="What do I need to graduate?",
        answer=(
            "You must complete all required credit hours for your programme with a CGPA of at "
            "least 2.00, pass all core and university courses, clear all outstanding fees and "
            "apply for graduation through the student portal before the stated deadline."
        ),
        keywords=("graduate", "graduation", "convocation", "complete", "degree"),
        importance=HIGH,
    ),
    KnowledgeItem(
        topic="Withdrawal from University",
        category="Graduation",
        question="How do I withdraw from my studies?",
        answer=(
            "Submit a withdrawal form to the academic affairs office after consulting your "
            "academic advisor and clearing your fees. Withdrawal in the first two weeks of a "
            "semester may qualify for a partial fee refund."
        ),
        keywords=("withdraw", "withdrawal", "quit", "defer", "leave"),
        importance=HIGH,
    ),
]
