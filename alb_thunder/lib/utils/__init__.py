from .outputs_from_exports import outputs_from_exports, to_outputs
