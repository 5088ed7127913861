# ============================================
# CENTRALIZED ROLE → PERMISSIONS MAP
# ============================================
ROLE_PERMISSIONS = {

    # =====================================================
    # STUDENT: pays approved requests
    # =====================================================
    "student": [
        "requests:pay",
    ],

    # =====================================================
    # FACULTY: approves or rejects pending requests
    # =====================================================
    "faculty": [
        "requests:decide",
    ],

    # =====================================================
    # HOD: sees every request regardless of status
    # =====================================================
    "hod": [
        "requests:read_all",
    ],
}


# =====================================================
# LANDING PAGE AFTER LOGIN
# =====================================================
LANDING_PAGES = {
    "student": "/main.html",
    "faculty": "/faculty.html",
    "hod": "/hod.html",
}

DEFAULT_LANDING_PAGE = "/main.html"


def landing_page_for(role: str) -> str:
    return LANDING_PAGES.get(role, DEFAULT_LANDING_PAGE)
