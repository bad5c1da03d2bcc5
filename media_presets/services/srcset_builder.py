from typing import List, Mapping

from media_presets.models.render_descriptor import RenderDescriptor, SrcSet
from media_presets.services.media_url import MediaUrlFn


def build_srcsets(
    path: str,
    root: RenderDescriptor,
    breakpoints: Mapping[str, RenderDescriptor],
    media_url_fn: MediaUrlFn,
) -> List[SrcSet]:
    """One srcset entry per breakpoint, in the order given.

    Every URL carries the breakpoint width and density as a query suffix so
    identical renditions on different breakpoints stay distinguishable.
    The root descriptor is the fallback rendition and gets no entry.
    """
    srcsets = []
    for breakpoint, descriptor in breakpoints.items():
        url = media_url_fn(
            path, descriptor.size, descriptor.mode, descriptor.fill
        )
        sources = {
            resolution: (
                f"{url}?src={descriptor.max_width}w&res={resolution}"
            )
            for resolution in descriptor.resolutions
        }
        combined = " ,".join(
            f"{source} {resolution}"
            for resolution, source in sources.items()
        )
        srcsets.append(
            SrcSet(
                breakpoint=breakpoint,
                max_width=descriptor.max_width,
                sources=sources,
                combined=combined,
            )
        )
    return srcsets
