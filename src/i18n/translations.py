"""Static translation table for the portal interface.

Keys are dotted ``area.name`` strings. Malay (``ms``) is the primary
language; every key present in ``ms`` must be present in ``en``.
"""

from src.models.base import Language

TRANSLATIONS: dict[Language, dict[str, str]] = {
    Language.MS: {
        # Navigation
        "nav.dashboard": "Papan Pemuka",
        "nav.meetings": "Mesyuarat MBJ",
        "nav.decisions": "Keputusan",
        "nav.complaints": "Aduan & Cadangan",
        "nav.announcements": "Pengumuman",
        "nav.admin": "Pentadbiran",
        "nav.profile": "Profil",
        "nav.logout": "Log Keluar",
        "nav.login": "Log Masuk",
        # Common
        "common.search": "Cari...",
        "common.submit": "Hantar",
        "common.cancel": "Batal",
        "common.save": "Simpan",
        "common.edit": "Edit",
        "common.delete": "Padam",
        "common.view": "Lihat",
        "common.status": "Status",
        "common.date": "Tarikh",
        "common.actions": "Tindakan",
        "common.loading": "Memuatkan...",
        "common.noData": "Tiada data",
        "common.all": "Semua",
        "common.success": "Berjaya",
        "common.error": "Ralat",
        "common.genericError": "Permintaan gagal. Sila cuba lagi.",
        "common.notFound": "Rekod tidak dijumpai",
        "common.loginRequired": "Sila log masuk terlebih dahulu",
        # Landing
        "landing.title": "Portal Digital MBJ",
        "landing.subtitle": "Sistem pengurusan Majlis Bersama Jabatan",
        # Dashboard
        "dashboard.title": "Papan Pemuka",
        "dashboard.welcome": "Selamat Datang ke Portal Digital MBJ",
        "dashboard.greeting": "Selamat Datang",
        "dashboard.totalStaff": "Jumlah Anggota",
        "dashboard.pendingComplaints": "Aduan Tertunda",
        "dashboard.upcomingMeetings": "Mesyuarat Akan Datang",
        "dashboard.totalDecisions": "Jumlah Keputusan",
        "dashboard.recentAnnouncements": "Pengumuman Terkini",
        "dashboard.recentComplaints": "Aduan Terkini",
        "dashboard.quickActions": "Tindakan Pantas",
        # Meetings
        "meetings.title": "Mesyuarat MBJ",
        "meetings.upcoming": "Mesyuarat Akan Datang",
        "meetings.past": "Mesyuarat Lepas",
        "meetings.scheduled": "Dijadualkan",
        "meetings.completed": "Selesai",
        "meetings.cancelled": "Dibatalkan",
        "meetings.addNew": "Tambah Mesyuarat",
        "meetings.editMeeting": "Edit Mesyuarat",
        "meetings.viewMinutes": "Lihat Minit",
        "meetings.location": "Lokasi",
        "meetings.minutes": "Minit Mesyuarat",
        "meetings.fileTooLarge": "Fail terlalu besar (max 10MB)",
        "meetings.uploadError": "Gagal memuat naik fail",
        "meetings.uploadSuccess": "Minit mesyuarat berjaya dimuat naik",
        "meetings.minutesRemoved": "Minit mesyuarat telah dikeluarkan",
        "meetings.createSuccess": "Mesyuarat berjaya dicipta",
        "meetings.updateSuccess": "Mesyuarat berjaya dikemaskini",
        "meetings.deleteSuccess": "Mesyuarat berjaya dipadam",
        "meetings.saveError": "Gagal menyimpan mesyuarat",
        "meetings.deleteError": "Gagal memadam mesyuarat",
        "meetings.confirmDelete": "Padam Mesyuarat?",
        "meetings.deleteWarning": (
            "Tindakan ini tidak boleh dibatalkan. "
            "Semua keputusan berkaitan juga akan dipadam."
        ),
        "meetings.decisions": "Keputusan",
        "meetings.noDecisions": "Tiada keputusan untuk mesyuarat ini",
        # Decisions
        "decisions.title": "Keputusan MBJ",
        "decisions.pending": "Tertunda",
        "decisions.inProgress": "Dalam Proses",
        "decisions.completed": "Selesai",
        "decisions.overdue": "Terlewat",
        "decisions.addNew": "Tambah Keputusan",
        "decisions.editDecision": "Edit Keputusan",
        "decisions.number": "Nombor Keputusan",
        "decisions.responsibleParty": "Pihak Bertanggungjawab",
        "decisions.dueDate": "Tarikh Akhir",
        "decisions.createSuccess": "Keputusan berjaya dicipta",
        "decisions.updateSuccess": "Keputusan berjaya dikemaskini",
        "decisions.deleteSuccess": "Keputusan berjaya dipadam",
        "decisions.saveError": "Gagal menyimpan keputusan",
        "decisions.deleteError": "Gagal memadam keputusan",
        "decisions.confirmDelete": "Padam Keputusan?",
        "decisions.deleteWarning": "Tindakan ini tidak boleh dibatalkan.",
        # Complaints
        "complaints.title": "Aduan & Cadangan",
        "complaints.new": "Aduan Baru",
        "complaints.complaint": "Aduan",
        "complaints.suggestion": "Cadangan",
        "complaints.pending": "Tertunda",
        "complaints.inProgress": "Dalam Siasatan",
        "complaints.resolved": "Selesai",
        "complaints.rejected": "Ditolak",
        "complaints.submitNew": "Hantar Aduan/Cadangan",
        "complaints.reference": "No. Rujukan",
        "complaints.category": "Kategori",
        "complaints.subject": "Subjek",
        "complaints.description": "Keterangan",
        "complaints.priority": "Keutamaan",
        "complaints.resolution": "Penyelesaian",
        "complaints.submittedBy": "Dihantar Oleh",
        "complaints.assignedTo": "Ditugaskan Kepada",
        "complaints.submitSuccess": "Aduan/cadangan berjaya dihantar",
        "complaints.statusUpdated": "Status telah dikemaskini",
        "complaints.resolutionRequired": (
            "Maklum balas / penyelesaian diperlukan untuk status ini"
        ),
        "complaints.alreadyClosed": "Aduan ini telah ditutup",
        "complaints.deleteSuccess": "Aduan berjaya dipadam",
        # Complaint categories
        "category.welfare": "Kebajikan",
        "category.facilities": "Kemudahan",
        "category.hr": "Sumber Manusia",
        "category.finance": "Kewangan",
        "category.safety": "Keselamatan",
        "category.others": "Lain-lain",
        # Priorities
        "priority.low": "Rendah",
        "priority.normal": "Biasa",
        "priority.high": "Tinggi",
        "priority.urgent": "Segera",
        # Announcements
        "announcements.title": "Pengumuman",
        "announcements.latest": "Pengumuman Terkini",
        "announcements.pinned": "Pengumuman Penting",
        "announcements.general": "Umum",
        "announcements.urgent": "Segera",
        "announcements.event": "Acara",
        "announcements.policy": "Polisi",
        "announcements.welfare": "Kebajikan",
        "announcements.hr": "Sumber Manusia",
        "announcements.new": "Pengumuman Baru",
        "announcements.edit": "Edit Pengumuman",
        "announcements.delete": "Padam Pengumuman",
        "announcements.publish": "Terbitkan",
        "announcements.expires": "Tarikh Tamat",
        "announcements.createSuccess": "Pengumuman telah diterbitkan.",
        "announcements.updateSuccess": "Pengumuman telah dikemaskini.",
        "announcements.deleteSuccess": "Pengumuman telah dipadam.",
        # Admin
        "admin.title": "Panel Pentadbiran",
        "admin.users": "Pengurusan Pengguna",
        "admin.roles": "Peranan",
        "admin.auditLog": "Log Audit",
        "admin.totalUsers": "Jumlah Pengguna",
        "admin.changeRole": "Tukar Peranan",
        "admin.confirmChange": "Sahkan Perubahan",
        "admin.confirmRequired": "Perubahan peranan perlu disahkan",
        "admin.roleUpdated": "Peranan berjaya dikemaskini",
        "admin.roleUpdateError": "Gagal mengemaskini peranan",
        "admin.ownRole": "Anda tidak boleh menukar peranan anda sendiri",
        "admin.accessDenied": "Akses Ditolak",
        "admin.noPermission": (
            "Anda tidak mempunyai kebenaran untuk mengakses halaman ini."
        ),
        # Audit actions
        "audit.create": "Cipta",
        "audit.update": "Kemaskini",
        "audit.delete": "Padam",
        "audit.login": "Log Masuk",
        "audit.logout": "Log Keluar",
        # Audit entities
        "entity.complaints": "Aduan",
        "entity.announcements": "Pengumuman",
        "entity.meetings": "Mesyuarat",
        "entity.decisions": "Keputusan",
        "entity.profiles": "Profil",
        "entity.user_roles": "Peranan Pengguna",
        "entity.sessions": "Sesi",
        # Auth
        "auth.login": "Log Masuk",
        "auth.logout": "Log Keluar",
        "auth.email": "Emel",
        "auth.password": "Kata Laluan",
        "auth.register": "Daftar",
        "auth.fullName": "Nama Penuh",
        "auth.invalidCredentials": "Emel atau kata laluan tidak sah",
        "auth.emailNotVerified": "Sila sahkan emel anda terlebih dahulu",
        "auth.registerSuccess": (
            "Pendaftaran berjaya. Sila semak emel anda untuk pengesahan."
        ),
        "auth.verifySuccess": "Emel berjaya disahkan",
        "auth.loginSuccess": "Log masuk berjaya",
        "auth.logoutSuccess": "Anda telah log keluar",
        "auth.sessionExpired": "Sesi telah tamat. Sila log masuk semula.",
        # Roles
        "role.staff": "Anggota",
        "role.committee": "Jawatankuasa MBJ",
        "role.chairman": "Pengerusi",
        # Profile
        "profile.personalInfo": "Maklumat Peribadi",
        "profile.phone": "No. Telefon",
        "profile.department": "Jabatan",
        "profile.position": "Jawatan",
        "profile.updateSuccess": "Profil berjaya dikemaskini",
        "profile.updateError": "Gagal mengemaskini profil",
        "profile.languageSettings": "Tetapan Bahasa",
        "profile.languageUpdateSuccess": "Bahasa berjaya dikemaskini",
        # Header
        "header.portalTitle": "Portal Digital MBJ",
        "header.organization": "JPJ Negeri Melaka",
        "header.language": "Bahasa",
    },
    Language.EN: {
        # Navigation
        "nav.dashboard": "Dashboard",
        "nav.meetings": "MBJ Meetings",
        "nav.decisions": "Decisions",
        "nav.complaints": "Complaints & Suggestions",
        "nav.announcements": "Announcements",
        "nav.admin": "Administration",
        "nav.profile": "Profile",
        "nav.logout": "Log Out",
        "nav.login": "Log In",
        # Common
        "common.search": "Search...",
        "common.submit": "Submit",
        "common.cancel": "Cancel",
        "common.save": "Save",
        "common.edit": "Edit",
        "common.delete": "Delete",
        "common.view": "View",
        "common.status": "Status",
        "common.date": "Date",
        "common.actions": "Actions",
        "common.loading": "Loading...",
        "common.noData": "No data",
        "common.all": "All",
        "common.success": "Success",
        "common.error": "Error",
        "common.genericError": "The request failed. Please try again.",
        "common.notFound": "Record not found",
        "common.loginRequired": "Please log in first",
        # Landing
        "landing.title": "MBJ Digital Portal",
        "landing.subtitle": "Joint Departmental Council management system",
        # Dashboard
        "dashboard.title": "Dashboard",
        "dashboard.welcome": "Welcome to the MBJ Digital Portal",
        "dashboard.greeting": "Welcome",
        "dashboard.totalStaff": "Total Staff",
        "dashboard.pendingComplaints": "Pending Complaints",
        "dashboard.upcomingMeetings": "Upcoming Meetings",
        "dashboard.totalDecisions": "Total Decisions",
        "dashboard.recentAnnouncements": "Recent Announcements",
        "dashboard.recentComplaints": "Recent Complaints",
        "dashboard.quickActions": "Quick Actions",
        # Meetings
        "meetings.title": "MBJ Meetings",
        "meetings.upcoming": "Upcoming Meetings",
        "meetings.past": "Past Meetings",
        "meetings.scheduled": "Scheduled",
        "meetings.completed": "Completed",
        "meetings.cancelled": "Cancelled",
        "meetings.addNew": "Add Meeting",
        "meetings.editMeeting": "Edit Meeting",
        "meetings.viewMinutes": "View Minutes",
        "meetings.location": "Location",
        "meetings.minutes": "Meeting Minutes",
        "meetings.fileTooLarge": "File too large (max 10MB)",
        "meetings.uploadError": "Failed to upload file",
        "meetings.uploadSuccess": "Meeting minutes uploaded successfully",
        "meetings.minutesRemoved": "Meeting minutes removed",
        "meetings.createSuccess": "Meeting created successfully",
        "meetings.updateSuccess": "Meeting updated successfully",
        "meetings.deleteSuccess": "Meeting deleted successfully",
        "meetings.saveError": "Failed to save meeting",
        "meetings.deleteError": "Failed to delete meeting",
        "meetings.confirmDelete": "Delete Meeting?",
        "meetings.deleteWarning": (
            "This action cannot be undone. "
            "All related decisions will also be deleted."
        ),
        "meetings.decisions": "Decisions",
        "meetings.noDecisions": "No decisions for this meeting",
        # Decisions
        "decisions.title": "MBJ Decisions",
        "decisions.pending": "Pending",
        "decisions.inProgress": "In Progress",
        "decisions.completed": "Completed",
        "decisions.overdue": "Overdue",
        "decisions.addNew": "Add Decision",
        "decisions.editDecision": "Edit Decision",
        "decisions.number": "Decision Number",
        "decisions.responsibleParty": "Responsible Party",
        "decisions.dueDate": "Due Date",
        "decisions.createSuccess": "Decision created successfully",
        "decisions.updateSuccess": "Decision updated successfully",
        "decisions.deleteSuccess": "Decision deleted successfully",
        "decisions.saveError": "Failed to save decision",
        "decisions.deleteError": "Failed to delete decision",
        "decisions.confirmDelete": "Delete Decision?",
        "decisions.deleteWarning": "This action cannot be undone.",
        # Complaints
        "complaints.title": "Complaints & Suggestions",
        "complaints.new": "New Complaint",
        "complaints.complaint": "Complaint",
        "complaints.suggestion": "Suggestion",
        "complaints.pending": "Pending",
        "complaints.inProgress": "Under Investigation",
        "complaints.resolved": "Resolved",
        "complaints.rejected": "Rejected",
        "complaints.submitNew": "Submit Complaint/Suggestion",
        "complaints.reference": "Reference No.",
        "complaints.category": "Category",
        "complaints.subject": "Subject",
        "complaints.description": "Description",
        "complaints.priority": "Priority",
        "complaints.resolution": "Resolution",
        "complaints.submittedBy": "Submitted By",
        "complaints.assignedTo": "Assigned To",
        "complaints.submitSuccess": "Complaint/suggestion submitted successfully",
        "complaints.statusUpdated": "Status has been updated",
        "complaints.resolutionRequired": (
            "A response / resolution is required for this status"
        ),
        "complaints.alreadyClosed": "This complaint has already been closed",
        "complaints.deleteSuccess": "Complaint deleted successfully",
        # Complaint categories
        "category.welfare": "Welfare",
        "category.facilities": "Facilities",
        "category.hr": "Human Resources",
        "category.finance": "Finance",
        "category.safety": "Safety",
        "category.others": "Others",
        # Priorities
        "priority.low": "Low",
        "priority.normal": "Normal",
        "priority.high": "High",
        "priority.urgent": "Urgent",
        # Announcements
        "announcements.title": "Announcements",
        "announcements.latest": "Latest Announcements",
        "announcements.pinned": "Important Announcements",
        "announcements.general": "General",
        "announcements.urgent": "Urgent",
        "announcements.event": "Event",
        "announcements.policy": "Policy",
        "announcements.welfare": "Welfare",
        "announcements.hr": "Human Resources",
        "announcements.new": "New Announcement",
        "announcements.edit": "Edit Announcement",
        "announcements.delete": "Delete Announcement",
        "announcements.publish": "Publish",
        "announcements.expires": "Expiry Date",
        "announcements.createSuccess": "Announcement has been published.",
        "announcements.updateSuccess": "Announcement has been updated.",
        "announcements.deleteSuccess": "Announcement has been deleted.",
        # Admin
        "admin.title": "Administration Panel",
        "admin.users": "User Management",
        "admin.roles": "Roles",
        "admin.auditLog": "Audit Log",
        "admin.totalUsers": "Total Users",
        "admin.changeRole": "Change Role",
        "admin.confirmChange": "Confirm Change",
        "admin.confirmRequired": "Role changes must be confirmed",
        "admin.roleUpdated": "Role updated successfully",
        "admin.roleUpdateError": "Failed to update role",
        "admin.ownRole": "You cannot change your own role",
        "admin.accessDenied": "Access Denied",
        "admin.noPermission": "You do not have permission to access this page.",
        # Audit actions
        "audit.create": "Create",
        "audit.update": "Update",
        "audit.delete": "Delete",
        "audit.login": "Login",
        "audit.logout": "Logout",
        # Audit entities
        "entity.complaints": "Complaints",
        "entity.announcements": "Announcements",
        "entity.meetings": "Meetings",
        "entity.decisions": "Decisions",
        "entity.profiles": "Profiles",
        "entity.user_roles": "User Roles",
        "entity.sessions": "Sessions",
        # Auth
        "auth.login": "Log In",
        "auth.logout": "Log Out",
        "auth.email": "Email",
        "auth.password": "Password",
        "auth.register": "Register",
        "auth.fullName": "Full Name",
        "auth.invalidCredentials": "Invalid email or password",
        "auth.emailNotVerified": "Please verify your email first",
        "auth.registerSuccess": (
            "Registration successful. Please check your email for verification."
        ),
        "auth.verifySuccess": "Email verified successfully",
        "auth.loginSuccess": "Logged in successfully",
        "auth.logoutSuccess": "You have been logged out",
        "auth.sessionExpired": "Your session has expired. Please log in again.",
        # Roles
        "role.staff": "Staff",
        "role.committee": "MBJ Committee",
        "role.chairman": "Chairman",
        # Profile
        "profile.personalInfo": "Personal Information",
        "profile.phone": "Phone Number",
        "profile.department": "Department",
        "profile.position": "Position",
        "profile.updateSuccess": "Profile updated successfully",
        "profile.updateError": "Failed to update profile",
        "profile.languageSettings": "Language Settings",
        "profile.languageUpdateSuccess": "Language updated successfully",
        # Header
        "header.portalTitle": "MBJ Digital Portal",
        "header.organization": "JPJ Melaka State",
        "header.language": "Language",
    },
}

MONTH_ABBREVIATIONS: dict[Language, list[str]] = {
    Language.MS: [
        "Jan", "Feb", "Mac", "Apr", "Mei", "Jun",
        "Jul", "Ogo", "Sep", "Okt", "Nov", "Dis",
    ],
    Language.EN: [
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ],
}
