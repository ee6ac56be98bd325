"""VTO - FFmpeg transcode option builder.

Translates an encoder configuration and a probed video stream into the
FFmpeg command-line options for software (libx264, libx265, libvpx-vp9) and
hardware (NVENC, Quick Sync, VA-API) encoders.
"""

__version__ = "0.1.0"
