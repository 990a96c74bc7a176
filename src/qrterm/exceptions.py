class QRTermError(Exception):
    pass


class EncodeError(QRTermError):
    """Text could not be encoded as a QR code"""
