from pkgsearch.domain.session.util.di.provider import SessionProvider

__all__ = ["SessionProvider"]
