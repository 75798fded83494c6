"""Views living in a ``popup`` module, which implies ``Form.POPUP``."""

from __future__ import annotations

from showzup.domain import View


class DogImplicitPopupView(View):
    pass
