"""Async orchestration of the resource form lifecycle.

This module maps submit/delete/cancel events from the form page onto the save
and delete use cases, then drives navigation and toasts. Form state lives on
:class:`storeadmin.viewmodels.resource_form_vm.ResourceFormVM`.

Call context:
    ``storeadmin.web_ui.main`` builds one controller per rendered form page and
    binds button handlers to ``submit``, ``request_delete``, ``cancel_delete``
    and ``confirm_delete``. Blocking adapter calls run in a worker thread so
    the UI event loop stays responsive while a request is in flight.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from storeadmin.domain.entities import FormValues, ResourceRoute
from storeadmin.domain.ports import NavigatorPort, NotifierPort
from storeadmin.usecases.delete_resource import DeleteResource
from storeadmin.usecases.error_mapping import map_api_error
from storeadmin.usecases.save_resource import SaveResource
from storeadmin.viewmodels.resource_form_vm import ResourceFormVM

GENERIC_ERROR_MESSAGE = "Something went wrong"

RunBlocking = Callable[..., Awaitable[Any]]


class ResourceFormController:
    """Submit and confirmation-gated delete for one form instance.

    ``vm.is_submitting`` is the only concurrency guard: while it is set,
    further submit and confirm events return immediately without side effects.
    """

    def __init__(
        self,
        *,
        vm: ResourceFormVM,
        route: ResourceRoute,
        save_uc: SaveResource,
        delete_uc: DeleteResource,
        navigator: NavigatorPort,
        notifier: NotifierPort,
        run_blocking: Optional[RunBlocking] = None,
    ) -> None:
        """Store collaborators.

        Args:
            vm: Form state for the page.
            route: Store/collection/resource identifiers of the page.
            save_uc: Insert-or-update use case.
            delete_uc: Delete use case.
            navigator: Refresh/push primitive of the hosting UI.
            notifier: Toast sink.
            run_blocking: Awaitable runner for blocking calls, defaults to
                ``asyncio.to_thread``.
        """
        self._log = logging.getLogger(__name__)
        self.vm = vm
        self.route = route
        self.save_uc = save_uc
        self.delete_uc = delete_uc
        self.navigator = navigator
        self.notifier = notifier
        self._run_blocking: RunBlocking = run_blocking or asyncio.to_thread
        self._disposed = False

    def dispose(self) -> None:
        """Detach from the page; pending calls finish without visible effects."""
        self._disposed = True
        self.vm.on_state_changed = None

    @property
    def disposed(self) -> bool:
        return self._disposed

    async def submit(self) -> bool:
        """Validate and save the form.

        Returns:
            ``True`` when the record was saved and the page navigated away.

        Error Cases:
            Validation failures leave field errors on the VM and make no call.
            Save failures are logged and surfaced as the generic toast; the
            user stays on the form.
        """
        if not self.vm.can_submit:
            self._log.debug("Submit ignored: request already in flight")
            return False
        if not self.vm.validate():
            self._log.debug("Submit blocked by field errors: %s", sorted(self.vm.field_errors))
            return False
        if not self.vm.begin_submit():
            return False
        values = FormValues(name=self.vm.values.name, value=self.vm.values.value)
        try:
            record = await self._run_blocking(self.save_uc, self.route, self.vm.mode, values)
            if self._disposed:
                return True
            self._log.info("Saved %s %s in store %s", self.route.collection, record.id, self.route.store_id)
            self._leave_form(self.vm.toast_message)
            return True
        except Exception as exc:
            err = map_api_error(exc, default_code="SAVE_FAILED")
            self._log.warning("Save failed (%s): %s", err.code, err.message)
            if not self._disposed:
                self.notifier.error(GENERIC_ERROR_MESSAGE)
            return False
        finally:
            self.vm.end_submit()

    def request_delete(self) -> bool:
        """Open the confirmation dialog (edit mode only, no network effect)."""
        return self.vm.open_confirm()

    def cancel_delete(self) -> None:
        self.vm.close_confirm()

    async def confirm_delete(self) -> bool:
        """Delete the record after the user confirmed in the dialog.

        Any failure is reported with the "still in use" message, since a
        referencing product is the expected reason a delete is rejected.
        """
        if not self.vm.can_confirm_delete:
            self._log.debug("Delete confirm ignored (dialog closed or request in flight)")
            return False
        if not self.vm.begin_submit():
            return False
        try:
            await self._run_blocking(self.delete_uc, self.route)
            if self._disposed:
                return True
            self._log.info(
                "Deleted %s %s in store %s", self.route.collection, self.route.resource_id, self.route.store_id
            )
            self._leave_form(self.vm.deleted_message)
            return True
        except Exception as exc:
            err = map_api_error(exc, default_code="DELETE_FAILED")
            self._log.warning("Delete failed (%s): %s", err.code, err.message)
            if not self._disposed:
                self.notifier.error(self.vm.delete_blocked_message)
            return False
        finally:
            self.vm.end_submit()
            self.vm.close_confirm()

    def _leave_form(self, message: str) -> None:
        self.navigator.refresh()
        self.navigator.push(self.route.list_path())
        self.notifier.success(message)


__all__ = ["GENERIC_ERROR_MESSAGE", "ResourceFormController"]
