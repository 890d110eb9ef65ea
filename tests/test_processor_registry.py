import pytest
from calibration_factories import flat, histogram_pair, likelihood_calibration

from hep_varproc.config.calibration_config import NormalizeCalibration
from hep_varproc.processors.likelihood import LikelihoodProcessor
from hep_varproc.processors.normalize import NormalizeProcessor
from hep_varproc.processors.processor_registry import ProcessorFactory


def test_available_types():
    assert {"ProcLikelihood", "ProcNormalize"} <= set(ProcessorFactory.available_types())


def test_create_from_calibration_object():
    calib = likelihood_calibration([histogram_pair(0.8, 0.2)], bias=0.5)
    processor = ProcessorFactory.create_processor("ProcLikelihood", calib, name="btag")

    assert isinstance(processor, LikelihoodProcessor)
    assert processor.name == "btag"
    assert processor.bias == 0.5


def test_create_from_dict_uses_type_as_default_name():
    processor = ProcessorFactory.create_processor(
        "ProcNormalize",
        {"category_idx": -1, "distr": [flat().to_dict(), flat().to_dict()]},
    )

    assert isinstance(processor, NormalizeProcessor)
    assert processor.name == "ProcNormalize"
    assert len(processor.maps) == 2


def test_unknown_type():
    with pytest.raises(ValueError, match="Unknown processor type"):
        ProcessorFactory.create_processor("ProcMLP", {})


def test_wrong_calibration_type():
    with pytest.raises(ValueError, match="expects a LikelihoodCalibration"):
        ProcessorFactory.create_processor(
            "ProcLikelihood", NormalizeCalibration(distr=[flat()])
        )


def test_invalid_calibration_is_rejected():
    with pytest.raises(ValueError, match="pdfs cannot be empty"):
        ProcessorFactory.create_processor("ProcLikelihood", {"pdfs": []})


def test_register_processor(monkeypatch):
    monkeypatch.setattr(
        ProcessorFactory, "PROCESSOR_CLASSES", dict(ProcessorFactory.PROCESSOR_CLASSES)
    )
    monkeypatch.setattr(
        ProcessorFactory, "CALIBRATION_CLASSES", dict(ProcessorFactory.CALIBRATION_CLASSES)
    )

    class ProcEqualize(NormalizeProcessor):
        pass

    ProcessorFactory.register_processor("ProcEqualize", ProcEqualize, NormalizeCalibration)
    processor = ProcessorFactory.create_processor(
        "ProcEqualize", NormalizeCalibration(distr=[flat()])
    )

    assert isinstance(processor, ProcEqualize)
    assert "ProcEqualize" in ProcessorFactory.available_types()
