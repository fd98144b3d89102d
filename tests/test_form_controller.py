"""End-to-end tests for the form controller event handling."""

import logging

from formcheck.controller import FormController, create_form_controller
from formcheck.forms.fields import FieldStatus
from formcheck.logic.validators import create_default_registry
from formcheck.presentation.success_banner import SuccessBanner


def fill(controller, values):
    for field_id, value in values.items():
        controller.on_change(field_id, value)


class TestBlurAndChange:
    def test_initial_status_untouched(self, registration_specs):
        controller = create_form_controller("cadastro", registration_specs)
        assert all(
            controller.field_status(f) == FieldStatus.UNTOUCHED
            for f in controller.form.field_ids
        )
        assert controller.errors == {}

    def test_required_blur_shows_single_error(self, registration_specs):
        controller = create_form_controller("cadastro", registration_specs)

        assert controller.on_blur("nome") is False

        field = controller.form.get_field("nome")
        assert controller.errors == {"nome": "field is required"}
        assert controller.field_status("nome") == FieldStatus.INVALID
        assert len(field.container.children) == 1
        assert field.error_message == "field is required"

    def test_typing_clears_error_without_revalidating(self, registration_specs):
        controller = create_form_controller("cadastro", registration_specs)
        controller.on_blur("nome")

        # "M" is still too short, but no new error appears until the next blur
        controller.on_change("nome", "M")

        field = controller.form.get_field("nome")
        assert controller.errors == {}
        assert field.container.children == []
        assert not field.is_invalid
        assert controller.field_status("nome") == FieldStatus.UNTOUCHED

        assert controller.on_blur("nome") is False
        assert controller.errors == {"nome": "must be at least 3 characters"}

    def test_change_on_valid_field_keeps_status(self, registration_specs):
        controller = create_form_controller("cadastro", registration_specs)
        controller.on_change("nome", "Maria")
        controller.on_blur("nome")
        controller.on_change("nome", "Mar")
        assert controller.field_status("nome") == FieldStatus.VALID

    def test_reblur_with_different_error_overwrites(self, registration_specs):
        controller = create_form_controller("cadastro", registration_specs)
        controller.on_blur("cpf")
        controller.form.get_field("cpf").value = "123"
        controller.on_blur("cpf")

        field = controller.form.get_field("cpf")
        assert controller.errors == {"cpf": "wrong length"}
        assert len(field.container.children) == 1

    def test_invalid_to_valid(self, registration_specs):
        controller = create_form_controller("cadastro", registration_specs)
        controller.on_change("cep", "0131-100")
        assert controller.on_blur("cep") is False

        controller.form.get_field("cep").value = "01310-100"
        assert controller.on_blur("cep") is True
        assert controller.field_status("cep") == FieldStatus.VALID
        assert "cep" not in controller.errors

    def test_unknown_field_is_noop(self, registration_specs, caplog):
        controller = create_form_controller("cadastro", registration_specs)
        with caplog.at_level(logging.WARNING):
            controller.on_change("missing", "x")
            assert controller.on_blur("missing") is True
        assert "Unknown field 'missing'" in caplog.text

    def test_errors_property_is_a_copy(self, registration_specs):
        controller = create_form_controller("cadastro", registration_specs)
        controller.on_blur("nome")
        controller.errors.clear()
        assert "nome" in controller.errors


class TestSubmit:
    def test_valid_submit_saves_and_resets(self, registration_specs, valid_values, store, scheduler):
        banner = SuccessBanner(scheduler)
        controller = create_form_controller(
            "cadastro", registration_specs, store=store, banner=banner, banner_seconds=5
        )
        fill(controller, valid_values)

        result = controller.on_submit()

        assert result["is_valid"] is True
        assert result["is_reset"] is True
        assert result["validation_errors"] == {}
        assert result["submission"]["cpf"] == "529.982.247-25"

        history = controller.history()
        assert len(history) == 1
        assert history[0].values == valid_values
        assert store.load("cadastro") == valid_values

        assert controller.errors == {}
        assert set(controller.form.values().values()) == {""}

        assert banner.visible
        assert scheduler.calls[0][0] == 5
        scheduler.fire_all()
        assert not banner.visible

    def test_invalid_submit_shows_every_failure(self, registration_specs, valid_values, store):
        controller = create_form_controller("cadastro", registration_specs, store=store)
        fill(controller, {**valid_values, "cpf": "111.111.111-11", "telefone": "1234", "email": ""})

        result = controller.on_submit()

        assert result["is_valid"] is False
        assert result["submission"] is None
        assert result["is_reset"] is False
        assert result["validation_errors"] == {
            "cpf": "invalid",
            "telefone": "must have 10 or 11 digits",
            "email": "field is required",
        }
        assert controller.history() == []
        assert controller.form.get_field("nome").value == "Maria Silva"
        for field_id in ("cpf", "telefone", "email"):
            assert controller.form.get_field(field_id).is_invalid
        assert not controller.form.get_field("nome").is_invalid

    def test_submit_validates_untouched_fields(self, registration_specs):
        controller = create_form_controller("cadastro", registration_specs)
        result = controller.on_submit()
        assert set(result["validation_errors"]) == {"nome", "email", "cpf", "estado"}

    def test_history_capped_after_many_submits(self, registration_specs, valid_values, store):
        controller = create_form_controller("cadastro", registration_specs, store=store)
        for i in range(11):
            fill(controller, {**valid_values, "nome": f"Maria {i}"})
            assert controller.on_submit()["is_valid"] is True

        history = controller.history()
        assert len(history) == 10
        assert history[0].values["nome"] == "Maria 1"
        assert controller.errors == {}

    def test_submit_without_banner(self, registration_specs, valid_values):
        controller = create_form_controller("cadastro", registration_specs)
        fill(controller, valid_values)
        result = controller.on_submit()
        assert result["notification"]["duration_seconds"] == controller.banner_seconds

    def test_clear_history(self, registration_specs, valid_values, store):
        controller = create_form_controller("cadastro", registration_specs, store=store)
        fill(controller, valid_values)
        controller.on_submit()
        controller.clear_history()
        assert controller.history() == []


class TestSavedData:
    def test_load_saved_prefills(self, registration_specs, valid_values, store):
        store.save("cadastro", {**valid_values, "obsolete": "x"})
        controller = create_form_controller("cadastro", registration_specs, store=store)

        assert controller.load_saved() is True
        assert controller.form.values() == valid_values

    def test_load_saved_nothing(self, registration_specs, store):
        controller = create_form_controller("cadastro", registration_specs, store=store)
        assert controller.load_saved() is False


class TestConstruction:
    def test_controllers_are_independent(self, registration_specs):
        first = create_form_controller("a", registration_specs)
        second = create_form_controller("b", registration_specs)
        first.registry.register("custom", lambda v: None)
        first.on_blur("nome")

        assert second.registry.get("custom") is None
        assert second.errors == {}

    def test_custom_registry(self, registration_specs):
        registry = create_default_registry()
        registry.register("non_empty_selection", lambda v: None if v in ("SP", "RJ") else "unknown state")
        controller = create_form_controller("cadastro", registration_specs, registry=registry)
        controller.on_change("estado", "XX")
        assert controller.on_blur("estado") is False
        assert controller.errors["estado"] == "unknown state"

    def test_returns_controller(self, registration_specs):
        assert isinstance(create_form_controller("cadastro", registration_specs), FormController)
