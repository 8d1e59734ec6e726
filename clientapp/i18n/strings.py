"""Translation strings for all user-facing messages.

Keys use dot notation grouped by workflow (e.g. 'submit.missing_fields').
"""

from typing import Dict, List

STRINGS: Dict[str, Dict[str, str]] = {
    "id": {
        # Booking submission
        "submit.missing_fields": "Mohon lengkapi data yang wajib diisi (Nama & No. HP)",
        "submit.session_expired": "Sesi habis, silakan login kembali.",
        "submit.invalid_court": "Lapangan tidak valid, silakan pilih lapangan dari daftar yang tersedia.",
        "submit.invalid_time": "Format waktu tidak valid",
        "submit.booking_invalid": "Booking tidak valid",
        "submit.network_error": "Terjadi kesalahan jaringan (Pastikan server backend jalan)",
        "submit.redirecting": "Mengalihkan ke halaman pembayaran Midtrans...",
        "submit.payment_unavailable": "Gagal mendapatkan halaman pembayaran. Silakan coba lagi.",

        # Booking status
        "status.fetch_failed": "Gagal mengambil status booking",
        "status.enter_id": "Masukkan Booking ID untuk melihat status.",

        # Summary labels
        "summary.court": "Lapangan",
        "summary.schedule": "Jadwal",
        "summary.estimated_price": "Harga Perkiraan",
        "summary.location": "Lokasi",
        "summary.date": "Tanggal",
        "summary.time": "Waktu",
        "summary.price": "Harga",
        "summary.status": "Status",
    },
    "en": {
        "submit.missing_fields": "Please fill in the required fields (Name & Phone)",
        "submit.session_expired": "Your session has expired, please log in again.",
        "submit.invalid_court": "Invalid court, please choose a court from the available list.",
        "submit.invalid_time": "Invalid time format",
        "submit.booking_invalid": "Invalid booking",
        "submit.network_error": "A network error occurred (make sure the backend server is running)",
        "submit.redirecting": "Redirecting to the Midtrans payment page...",
        "submit.payment_unavailable": "Could not obtain the payment page. Please try again.",

        "status.fetch_failed": "Failed to fetch booking status",
        "status.enter_id": "Enter a Booking ID to view its status.",

        "summary.court": "Court",
        "summary.schedule": "Schedule",
        "summary.estimated_price": "Estimated Price",
        "summary.location": "Location",
        "summary.date": "Date",
        "summary.time": "Time",
        "summary.price": "Price",
        "summary.status": "Status",
    },
}

WEEKDAY_NAMES: Dict[str, List[str]] = {
    # Monday first, matching ``date.weekday()``
    "id": ["Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"],
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}

MONTH_NAMES: Dict[str, List[str]] = {
    "id": [
        "Januari", "Februari", "Maret", "April", "Mei", "Juni",
        "Juli", "Agustus", "September", "Oktober", "November", "Desember",
    ],
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}
