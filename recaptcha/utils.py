# Priority order for IP headers (Cloudflare → Nginx → Generic → Direct)
IP_HEADERS = [
    "HTTP_CF_CONNECTING_IP",
    "HTTP_X_REAL_IP",
    "HTTP_X_FORWARDED_FOR",
    "REMOTE_ADDR",
]


def get_client_ip(request):
    """Get client IP address from request, prioritizing proxy headers.

    Returns an empty string when no address is available, which makes the
    verification request omit the remoteip field.
    """
    for header in IP_HEADERS:
        ip = request.META.get(header)
        if ip:
            # X-Forwarded-For holds a comma-separated chain, client first
            if "," in ip:
                ip = ip.split(",")[0]
            ip = ip.strip()
            if ip:
                return ip
    return ""
